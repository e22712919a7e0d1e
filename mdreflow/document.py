from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


_NEWLINE_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class TextBuffer:
    """Read-only, line-addressable snapshot of a document.

    Each line keeps its own terminator in ``endings`` ("" for a last line
    without one), so mixed LF/CRLF documents are written back unchanged.
    """

    lines: Tuple[str, ...] = ()
    endings: Tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        lines: List[str] = []
        endings: List[str] = []
        pos = 0
        for m in _NEWLINE_RE.finditer(text):
            lines.append(text[pos:m.start()])
            endings.append(m.group())
            pos = m.end()
        if pos < len(text):
            lines.append(text[pos:])
            endings.append("")
        return cls(lines=tuple(lines), endings=tuple(endings))

    @property
    def newline(self) -> str:
        """Terminator used for lines an edit adds; the first one seen wins."""
        return next((e for e in self.endings if e), "\n")

    @property
    def trailing_newline(self) -> bool:
        return bool(self.endings) and self.endings[-1] != ""

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line(self, index: int) -> str:
        return self.lines[index]

    def first_non_whitespace(self, index: int) -> int:
        text = self.lines[index]
        return len(text) - len(text.lstrip())

    def is_blank(self, index: int) -> bool:
        return not self.lines[index].strip()

    def text_between(self, start: int, end: int) -> str:
        return "\n".join(self.lines[start:end + 1])

    def to_text(self) -> str:
        return "".join(line + ending for line, ending in zip(self.lines, self.endings))


@dataclass(frozen=True)
class StructuralRange:
    kind: str  # "front_matter" | "fenced_code" | "bracket_expr"
    start: int
    end: int

    def contains(self, line: int) -> bool:
        return self.start <= line <= self.end

    def overlaps(self, start: int, end: int) -> bool:
        return not (end < self.start or start > self.end)


@dataclass(frozen=True)
class UnitExtent:
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def overlaps(self, start: int, end: int) -> bool:
        return not (end < self.start or start > self.end)


@dataclass(frozen=True)
class Edit:
    start: int
    end: int
    text: str


@dataclass
class ApplyResult:
    text: str
    edits_applied: int = 0
    lines_changed: List[int] = field(default_factory=list)


def apply_edits(buffer: TextBuffer, edits: Sequence[Edit]) -> ApplyResult:
    lines = list(buffer.lines)
    endings = list(buffer.endings)
    touched: List[int] = []
    # Bottom-up so earlier line numbers stay valid
    for edit in sorted(edits, key=lambda e: e.start, reverse=True):
        new_lines = edit.text.split("\n")
        # Inner breaks follow the span's first line; the last line keeps the span's own terminator
        inner = endings[edit.start] or buffer.newline
        lines[edit.start:edit.end + 1] = new_lines
        endings[edit.start:edit.end + 1] = [inner] * (len(new_lines) - 1) + [endings[edit.end]]
        touched.extend(range(edit.start, edit.end + 1))
    out = TextBuffer(lines=tuple(lines), endings=tuple(endings))
    return ApplyResult(text=out.to_text(), edits_applied=len(edits), lines_changed=sorted(touched))
