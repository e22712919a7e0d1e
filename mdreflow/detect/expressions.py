from __future__ import annotations

from typing import List, Optional, Tuple

from ..document import StructuralRange, TextBuffer


def _scan_line(text: str, depth: int) -> Tuple[int, bool]:
    """Return the brace depth after ``text`` and whether the line sits inside an expression.

    Braces inside inline code spans are ignored. A span opened by a run of N
    backticks is closed by the next run of at least N backticks on the line.
    """
    inside = depth > 0
    inline_ticks = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "`":
            run = 1
            while i + run < n and text[i + run] == "`":
                run += 1
            if not inline_ticks:
                inline_ticks = run
            elif run >= inline_ticks:
                inline_ticks = 0
            i += run
            continue
        if inline_ticks:
            i += 1
            continue
        if ch == "{":
            depth += 1
            inside = True
        elif ch == "}":
            depth = max(0, depth - 1)
        i += 1
    return depth, inside


def find_bracket_expressions(
    buffer: TextBuffer,
    fenced: List[StructuralRange],
    front_matter: Optional[StructuralRange] = None,
) -> List[StructuralRange]:
    ranges: List[StructuralRange] = []
    skipped = list(fenced) + ([front_matter] if front_matter else [])
    skipped_lines = {i for r in skipped for i in range(r.start, r.end + 1)}
    depth = 0
    start: Optional[int] = None

    for i in range(buffer.line_count):
        if i in skipped_lines:
            # Code fences terminate any surrounding expression
            if start is not None:
                ranges.append(StructuralRange("bracket_expr", start, i - 1))
                start = None
            depth = 0
            continue

        depth, inside = _scan_line(buffer.line(i), depth)
        if inside:
            if start is None:
                start = i
        elif start is not None:
            ranges.append(StructuralRange("bracket_expr", start, i - 1))
            start = None

    if start is not None:
        ranges.append(StructuralRange("bracket_expr", start, buffer.line_count - 1))
    return ranges
