from __future__ import annotations

import argparse
from pathlib import Path

from mdreflow.config import ReflowConfig, WrapLongLinks
from mdreflow.plan import reflow_markdown
from mdreflow.utils.logging import setup_logger


SAMPLE = """---
title: Reflow demo
---

import Tabs from "@theme/Tabs";

This first paragraph is long enough that it would normally be rewrapped, unless the first paragraph is protected.

- A list item whose text keeps going well past the preferred line length, so continuation lines get a hanging indent.
- [A link-only item](https://example.com)

> A quoted paragraph that is also far too long for a single line and therefore gets wrapped with the quote marker repeated.

:::note
See the [reference documentation](https://example.com/docs/reference/configuration/line-length) for details.
:::

```
code stays exactly as it is, no matter how long the line happens to be in the source file
```
"""


def main():
    p = argparse.ArgumentParser(description="Demo runner for mdreflow")
    p.add_argument("--file", action="append", help="Markdown file to process (repeatable)")
    p.add_argument("--width", type=int, default=60, help="Preferred line length")
    p.add_argument("--skip-first", action="store_true", help="Never reflow the first paragraph")
    p.add_argument("--outdir", default="demo_outputs", help="Output directory")
    p.add_argument("--log-level", default="INFO", help="Log level")
    args = p.parse_args()

    setup_logger(args.log_level)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    sources = [(Path(f).stem, Path(f).read_text(encoding="utf-8")) for f in args.file or []] or [("sample", SAMPLE)]

    for name, text in sources:
        # One output per link strategy, for side-by-side comparison
        for mode in WrapLongLinks:
            cfg = ReflowConfig(
                preferred_line_length=args.width,
                wrap_long_links=mode,
                never_reflow_first_paragraph=args.skip_first,
            )
            out = outdir / f"{name}.{mode.value}.md"
            print(f"[demo] {name} wrap_long_links={mode.value} -> {out}")
            out.write_text(reflow_markdown(text, cfg), encoding="utf-8")


if __name__ == "__main__":
    main()
