from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..document import StructuralRange, TextBuffer
from ..utils.logging import get_logger
from .expressions import find_bracket_expressions
from .fences import find_fenced_code
from .frontmatter import find_front_matter


@dataclass(frozen=True)
class DocumentStructure:
    front_matter: Optional[StructuralRange] = None
    fenced: List[StructuralRange] = field(default_factory=list)
    expressions: List[StructuralRange] = field(default_factory=list)

    @classmethod
    def scan(cls, buffer: TextBuffer) -> "DocumentStructure":
        fm = find_front_matter(buffer)
        fenced = find_fenced_code(buffer, fm)
        expressions = find_bracket_expressions(buffer, fenced, fm)
        get_logger(__name__).debug(
            f"Structure: front_matter={fm} fenced={len(fenced)} expressions={len(expressions)}"
        )
        return cls(front_matter=fm, fenced=fenced, expressions=expressions)

    def all_ranges(self) -> List[StructuralRange]:
        ranges = [self.front_matter] if self.front_matter else []
        return ranges + self.fenced + self.expressions

    def range_containing(self, line: int) -> Optional[StructuralRange]:
        for r in self.all_ranges():
            if r.contains(line):
                return r
        return None

    def in_front_matter(self, line: int) -> bool:
        return self.front_matter is not None and self.front_matter.contains(line)

    def in_fence(self, line: int) -> bool:
        return any(r.contains(line) for r in self.fenced)

    def in_expression(self, line: int) -> bool:
        return any(r.contains(line) for r in self.expressions)

    def is_block_boundary(self, line: int) -> bool:
        """Front matter and fenced code lines never join a reflow unit."""
        return self.in_front_matter(line) or self.in_fence(line)
