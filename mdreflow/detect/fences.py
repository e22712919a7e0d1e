from __future__ import annotations

import re
from typing import List, Optional

from ..document import StructuralRange, TextBuffer


_open_re = re.compile(r"^ {0,3}(`{3,}|~{3,})")


def _closes(text: str, char: str, length: int) -> bool:
    return re.match(rf"^ {{0,3}}{re.escape(char)}{{{length},}}\s*$", text) is not None


def find_fenced_code(buffer: TextBuffer, front_matter: Optional[StructuralRange] = None) -> List[StructuralRange]:
    ranges: List[StructuralRange] = []
    i = front_matter.end + 1 if front_matter else 0
    last = buffer.line_count - 1

    while i <= last:
        m = _open_re.match(buffer.line(i))
        if not m:
            i += 1
            continue
        fence = m.group(1)
        start = i
        end = last  # unterminated fence runs to end of document
        for j in range(start + 1, last + 1):
            if _closes(buffer.line(j), fence[0], len(fence)):
                end = j
                break
        ranges.append(StructuralRange("fenced_code", start, end))
        i = end + 1
    return ranges
