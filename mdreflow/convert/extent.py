from __future__ import annotations

from typing import Callable, Optional

from ..detect.structure import DocumentStructure
from ..document import TextBuffer, UnitExtent
from .lines import (
    BLOCKQUOTE,
    LIST,
    PARAGRAPH,
    classify_line,
    has_pipe_cells,
    is_standalone,
    is_table_line,
    is_table_separator,
)


def _walk(buffer: TextBuffer, seed: int, step: int, accept: Callable[[int], bool]) -> int:
    last = seed
    i = seed + step
    while 0 <= i < buffer.line_count and accept(i):
        last = i
        i += step
    return last


def is_table_at(buffer: TextBuffer, index: int, structure: DocumentStructure) -> bool:
    """Whether line ``index`` is part of a table.

    Rows with outer pipes always count. Rows without them (``a | b``) count
    when their run of piped lines also holds a separator line.
    """
    if structure.is_block_boundary(index):
        return False
    text = buffer.line(index)
    if is_table_line(text):
        return True
    if is_standalone(text) or not has_pipe_cells(text):
        return False

    def piped(i: int) -> bool:
        if structure.is_block_boundary(i) or is_standalone(buffer.line(i)):
            return False
        return has_pipe_cells(buffer.line(i))

    start = _walk(buffer, index, -1, piped)
    end = _walk(buffer, index, 1, piped)
    return any(is_table_separator(buffer.line(i)) for i in range(start, end + 1))


def _hard_stop(buffer: TextBuffer, structure: DocumentStructure, index: int) -> bool:
    if buffer.is_blank(index) or structure.is_block_boundary(index):
        return True
    return is_standalone(buffer.line(index)) or is_table_at(buffer, index, structure)


def resolve_unit(buffer: TextBuffer, line: int, structure: Optional[DocumentStructure] = None) -> UnitExtent:
    """Find the paragraph, list item, or blockquote block that ``line`` belongs to.

    Blank lines, front matter, fenced code, headings, tables, stand-alone tags,
    ``:::`` containers and thematic breaks bound a unit. A list item line always
    opens a new unit and absorbs the plain lines that follow it. Blockquote lines
    only group with blockquote lines of the same indent and ``>`` depth.
    """
    if buffer.line_count == 0:
        return UnitExtent(0, -1)
    line = min(max(line, 0), buffer.line_count - 1)
    structure = structure or DocumentStructure.scan(buffer)

    boundary = structure.range_containing(line)
    if boundary is not None and boundary.kind != "bracket_expr":
        return UnitExtent(boundary.start, boundary.end)

    text = buffer.line(line)
    if buffer.is_blank(line) or is_standalone(text):
        return UnitExtent(line, line)

    def table_line(i: int) -> bool:
        return is_table_at(buffer, i, structure)

    if table_line(line):
        return UnitExtent(_walk(buffer, line, -1, table_line), _walk(buffer, line, 1, table_line))

    seed = classify_line(text)

    if seed.type == BLOCKQUOTE:
        # An empty `>` line separates quoted paragraphs
        if not seed.content:
            return UnitExtent(line, line)

        def same_quote(i: int) -> bool:
            if _hard_stop(buffer, structure, i):
                return False
            ctx = classify_line(buffer.line(i))
            return (
                ctx.type == BLOCKQUOTE
                and bool(ctx.content)
                and ctx.indent == seed.indent
                and ctx.prefix == seed.prefix
            )

        return UnitExtent(_walk(buffer, line, -1, same_quote), _walk(buffer, line, 1, same_quote))

    def continuation(i: int) -> bool:
        if _hard_stop(buffer, structure, i):
            return False
        return classify_line(buffer.line(i)).type == PARAGRAPH

    start = line
    if seed.type != LIST:
        start = _walk(buffer, line, -1, continuation)
        # A list item directly above owns these lines as its continuation
        above = start - 1
        if above >= 0 and not _hard_stop(buffer, structure, above):
            if classify_line(buffer.line(above)).type == LIST:
                start = above
    end = _walk(buffer, line, 1, continuation)
    return UnitExtent(start, end)
