from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .config import ReflowConfig
from .document import Edit, TextBuffer, apply_edits
from .plan import plan_edits, reflow_at_cursor
from .utils.io import read_text_file, write_text_file
from .utils.logging import get_logger


@dataclass
class RunConfig:
    path: Path
    output: Optional[Path] = None
    in_place: bool = False
    check: bool = False
    line: Optional[int] = None  # 0-based cursor line; None=whole document
    lines: Optional[Tuple[int, int]] = None  # 0-based inclusive range
    reflow: ReflowConfig = field(default_factory=ReflowConfig)


@dataclass
class RunResult:
    path: Path
    text: str
    edits: List[Edit]
    written: Optional[Path] = None

    @property
    def changed(self) -> bool:
        return bool(self.edits)


def _load(path: Path, logger) -> TextBuffer:
    if not path.is_file():
        logger.error(f"No such file: {path}")
        raise SystemExit(1)
    try:
        return TextBuffer.from_text(read_text_file(path))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {path}: {e}")
        raise SystemExit(1)


def _plan(cfg: RunConfig, buffer: TextBuffer) -> List[Edit]:
    if cfg.line is not None:
        edit = reflow_at_cursor(buffer, cfg.line, cfg.reflow)
        return [edit] if edit else []
    return plan_edits(buffer, cfg.lines, cfg.reflow)


def run(cfg: RunConfig) -> RunResult:
    logger = get_logger(__name__)
    buffer = _load(cfg.path, logger)
    edits = _plan(cfg, buffer)
    result = RunResult(path=cfg.path, text=apply_edits(buffer, edits).text, edits=edits)
    logger.info(f"{cfg.path}: {len(edits)} unit(s) reflowed")

    if cfg.check:
        if result.changed:
            logger.warning(f"Would reflow: {cfg.path}")
        return result

    target = cfg.path if cfg.in_place else cfg.output
    if target is not None and (result.changed or target != cfg.path):
        written = write_text_file(target, result.text)
        result.written = written.path
        logger.info(f"Saved: {written.path} ({written.bytes_written} bytes)")
    return result
