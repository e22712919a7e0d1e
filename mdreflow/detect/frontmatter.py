from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from ..document import StructuralRange, TextBuffer


# Opening delimiter -> accepted closing delimiters
_DELIMITERS: Dict[str, Tuple[str, ...]] = {
    "---": ("---", "..."),  # YAML
    "+++": ("+++",),  # TOML
}

_delim_re = re.compile(r"^(---|\+\+\+|\.\.\.)\s*$")


def _delimiter(text: str) -> Optional[str]:
    m = _delim_re.match(text)
    return m.group(1) if m else None


def find_front_matter(buffer: TextBuffer) -> Optional[StructuralRange]:
    first = 0
    while first < buffer.line_count and buffer.is_blank(first):
        first += 1
    if first >= buffer.line_count:
        return None

    opener = _delimiter(buffer.line(first))
    if opener not in _DELIMITERS:
        return None

    closers = _DELIMITERS[opener]
    for i in range(first + 1, buffer.line_count):
        if _delimiter(buffer.line(i)) in closers:
            return StructuralRange("front_matter", 0, i)
    # Unterminated: protect everything rather than reflow metadata
    return StructuralRange("front_matter", 0, buffer.line_count - 1)
