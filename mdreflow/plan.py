from __future__ import annotations

from typing import List, Optional, Tuple

from .config import ReflowConfig
from .convert.extent import resolve_unit
from .convert.wrap import reflow_unit
from .detect.structure import DocumentStructure
from .document import Edit, TextBuffer, apply_edits
from .evaluate.skip import evaluate, precheck_cursor
from .utils.logging import get_logger


LineRange = Tuple[int, int]


def plan_edits(
    buffer: TextBuffer,
    line_range: Optional[LineRange] = None,
    config: Optional[ReflowConfig] = None,
    structure: Optional[DocumentStructure] = None,
) -> List[Edit]:
    """Reflow every unit of ``buffer`` (or of the inclusive ``line_range``).

    Units that cross the requested range are left alone. Only spans whose text
    actually changes produce an edit.
    """
    logger = get_logger(__name__)
    config = config or ReflowConfig()
    edits: List[Edit] = []
    if buffer.line_count == 0:
        return edits
    structure = structure or DocumentStructure.scan(buffer)

    last = buffer.line_count - 1
    restricted = line_range is not None
    if restricted:
        start, end = max(0, line_range[0]), min(last, line_range[1])
    else:
        start, end = 0, last

    i = start
    while i <= end:
        if buffer.is_blank(i):
            i += 1
            continue
        protected = structure.range_containing(i)
        if protected is not None:
            i = protected.end + 1
            continue

        extent = resolve_unit(buffer, i, structure)
        if restricted:
            if extent.start > end:
                break
            if extent.start < start or extent.end > end:
                logger.debug(f"Unit {extent.start}-{extent.end} crosses the requested range; left as is")
                i = extent.end + 1
                continue

        if evaluate(buffer, extent, config, structure):
            i = extent.end + 1
            continue

        original = buffer.text_between(extent.start, extent.end)
        reflowed = reflow_unit(buffer, extent, config)
        if reflowed != original:
            logger.debug(f"Reflow lines {extent.start}-{extent.end}")
            edits.append(Edit(extent.start, extent.end, reflowed))
        i = extent.end + 1

    return edits


def reflow_at_cursor(buffer: TextBuffer, line: int, config: Optional[ReflowConfig] = None) -> Optional[Edit]:
    """Reflow the unit under the cursor, the way the interactive command does."""
    logger = get_logger(__name__)
    config = config or ReflowConfig()
    if buffer.line_count == 0:
        return None
    line = min(max(line, 0), buffer.line_count - 1)
    structure = DocumentStructure.scan(buffer)

    reason = precheck_cursor(buffer, line, structure)
    if reason:
        logger.debug(f"Cursor line {line} not reflowable: {reason}")
        return None

    extent = resolve_unit(buffer, line, structure)
    if evaluate(buffer, extent, config, structure):
        return None
    reflowed = reflow_unit(buffer, extent, config)
    if reflowed == buffer.text_between(extent.start, extent.end):
        return None
    return Edit(extent.start, extent.end, reflowed)


def reflow_markdown(text: str, config: Optional[ReflowConfig] = None, line_range: Optional[LineRange] = None) -> str:
    buffer = TextBuffer.from_text(text)
    return apply_edits(buffer, plan_edits(buffer, line_range, config)).text
