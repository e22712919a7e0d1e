from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from dotenv import load_dotenv

from .version import __version__
from .config import WrapLongLinks, config_from_env
from .utils.logging import setup_logger
from .pipeline import RunConfig, run


app = typer.Typer(add_completion=False, help="Reflow Markdown paragraphs, list items and blockquotes.")


def parse_line_range(value: str) -> Tuple[int, int]:
    """Parse a 1-based inclusive ``START:END`` into a 0-based line range."""
    try:
        start_s, end_s = value.split(":", 1)
        start, end = int(start_s), int(end_s)
    except ValueError:
        raise typer.BadParameter(f"expected START:END, got {value!r}") from None
    if start < 1 or end < start:
        raise typer.BadParameter(f"invalid line range {value!r}")
    return start - 1, end - 1


@app.command()
def main(
    files: Optional[List[Path]] = typer.Argument(None, help="Markdown files to reflow", show_default=False),
    width: Optional[int] = typer.Option(None, "-w", "--width", help="Preferred line length (default 80)"),
    double_space: Optional[bool] = typer.Option(
        None, "--double-space/--single-space", help="Two spaces after sentence-ending punctuation"
    ),
    wrap_long_links: Optional[WrapLongLinks] = typer.Option(
        None, "--wrap-long-links", case_sensitive=False, help="Placement of links wider than the line"
    ),
    skip_first_paragraph: Optional[bool] = typer.Option(
        None, "--skip-first-paragraph/--reflow-first-paragraph", help="Never reflow the first content paragraph"
    ),
    lines: Optional[str] = typer.Option(None, "--lines", help="Only reflow units within START:END (1-based)"),
    line: Optional[int] = typer.Option(None, "--line", help="Only reflow the unit under this 1-based line"),
    check: bool = typer.Option(False, "--check", help="Exit with code 1 if any file would change"),
    in_place: bool = typer.Option(False, "-i", "--in-place", help="Rewrite files in place"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Output Markdown file path"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    version: bool = typer.Option(False, "--version", help="Print version and exit"),
):
    load_dotenv()
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    logger = setup_logger(log_level)
    if not files:
        logger.error("No input files given.")
        raise typer.Exit(code=2)
    if output is not None and (len(files) > 1 or in_place):
        logger.error("--output takes exactly one input file and cannot be combined with --in-place.")
        raise typer.Exit(code=2)
    if line is not None and line < 1:
        raise typer.BadParameter("line numbers start at 1", param_hint="--line")
    line_range = parse_line_range(lines) if lines else None

    try:
        reflow_cfg = config_from_env().with_overrides(
            preferred_line_length=width,
            double_space_between_sentences=double_space,
            wrap_long_links=wrap_long_links,
            never_reflow_first_paragraph=skip_first_paragraph,
        )
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=2)

    pending = []
    for path in files:
        cfg = RunConfig(
            path=path,
            output=output,
            in_place=in_place,
            check=check,
            line=line - 1 if line is not None else None,
            lines=line_range,
            reflow=reflow_cfg,
        )
        result = run(cfg)
        if result.changed:
            pending.append(path)
        if not (check or in_place or output):
            typer.echo(result.text, nl=False)

    if check and pending:
        raise typer.Exit(code=1)


def entrypoint():
    app()


if __name__ == "__main__":
    entrypoint()
