from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..config import ReflowConfig
from ..convert.extent import is_table_at, resolve_unit
from ..convert.lines import (
    is_footnote_def,
    is_heading,
    is_import,
    is_list_link_only,
    is_tag_only,
    is_triple_colon,
)
from ..detect.structure import DocumentStructure
from ..document import TextBuffer, UnitExtent
from ..utils.logging import get_logger


@dataclass(frozen=True)
class SkipDecision:
    skip: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.skip


@dataclass(frozen=True)
class _Unit:
    buffer: TextBuffer
    extent: UnitExtent
    config: ReflowConfig
    structure: DocumentStructure

    def lines(self) -> List[str]:
        return [self.buffer.line(i) for i in range(self.extent.start, self.extent.end + 1)]

    def any_line(self, pred: Callable[[str], bool]) -> bool:
        return any(pred(text) for text in self.lines())

    def any_table_line(self) -> bool:
        return any(
            is_table_at(self.buffer, i, self.structure) for i in range(self.extent.start, self.extent.end + 1)
        )

    def single_line(self, pred: Callable[[str], bool]) -> bool:
        return self.extent.size == 1 and pred(self.buffer.line(self.extent.start))


def first_content_unit(buffer: TextBuffer, structure: Optional[DocumentStructure] = None) -> Optional[UnitExtent]:
    """The first paragraph after front matter, blank lines and import statements."""
    structure = structure or DocumentStructure.scan(buffer)
    i = structure.front_matter.end + 1 if structure.front_matter else 0
    while i < buffer.line_count and (buffer.is_blank(i) or is_import(buffer.line(i))):
        i += 1
    if i >= buffer.line_count:
        return None
    return resolve_unit(buffer, i, structure)


def _overlaps_front_matter(u: _Unit) -> bool:
    fm = u.structure.front_matter
    return fm is not None and fm.overlaps(u.extent.start, u.extent.end)


def _overlaps_code_or_expression(u: _Unit) -> bool:
    ranges = u.structure.fenced + u.structure.expressions
    return any(r.overlaps(u.extent.start, u.extent.end) for r in ranges)


def _overlaps_first_paragraph(u: _Unit) -> bool:
    if not u.config.never_reflow_first_paragraph:
        return False
    first = first_content_unit(u.buffer, u.structure)
    return first is not None and first.overlaps(u.extent.start, u.extent.end)


# Evaluated in order; the first match wins
_PREDICATES: Tuple[Tuple[str, Callable[[_Unit], bool]], ...] = (
    ("front_matter", _overlaps_front_matter),
    ("code_or_expression", _overlaps_code_or_expression),
    ("heading", lambda u: u.any_line(is_heading)),
    ("import", lambda u: u.any_line(is_import)),
    ("footnote_definition", lambda u: u.any_line(is_footnote_def)),
    ("table", lambda u: u.any_table_line()),
    ("list_link_only", lambda u: u.any_line(is_list_link_only)),
    ("first_paragraph", _overlaps_first_paragraph),
    ("container_marker", lambda u: u.single_line(is_triple_colon)),
    ("tag_only", lambda u: u.single_line(is_tag_only)),
)


def evaluate(
    buffer: TextBuffer,
    extent: UnitExtent,
    config: ReflowConfig,
    structure: Optional[DocumentStructure] = None,
) -> SkipDecision:
    unit = _Unit(buffer, extent, config, structure or DocumentStructure.scan(buffer))
    for reason, predicate in _PREDICATES:
        if predicate(unit):
            get_logger(__name__).debug(f"Skip lines {extent.start}-{extent.end}: {reason}")
            return SkipDecision(True, reason)
    return SkipDecision(False)


def should_skip(
    buffer: TextBuffer,
    extent: UnitExtent,
    config: ReflowConfig,
    structure: Optional[DocumentStructure] = None,
) -> bool:
    return evaluate(buffer, extent, config, structure).skip


def precheck_cursor(buffer: TextBuffer, line: int, structure: Optional[DocumentStructure] = None) -> Optional[str]:
    """Cheap checks on the cursor line before any unit is resolved.

    Returns the reason to leave the document alone, or None.
    """
    structure = structure or DocumentStructure.scan(buffer)
    if structure.in_front_matter(line):
        return "front_matter"
    if structure.in_fence(line) or structure.in_expression(line):
        return "code_or_expression"
    text = buffer.line(line)
    if is_heading(text):
        return "heading"
    if is_tag_only(text):
        return "tag_only"
    return None
