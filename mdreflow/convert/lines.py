from __future__ import annotations

import re
from dataclasses import dataclass


LIST = "list"
BLOCKQUOTE = "blockquote"
PARAGRAPH = "paragraph"

_list_re = re.compile(r"^(\s*)([*\-+]|\d+\.)\s+(.*)$")
_blockquote_re = re.compile(r"^(\s*)(>+)\s*(.*)$")
_indent_re = re.compile(r"^(\s*)")

# ATX heading: up to 3 spaces, 1-6 '#', then whitespace or end of line
ATX_HEADING_RE = re.compile(r"^\s{0,3}#{1,6}(?:\s|$)")
# `import X from "..."` and `import "..."`
IMPORT_RE = re.compile(r"""^\s*import\s+(?:[^'";]+?\s+from\s+)?['"][^'"]+['"]\s*;?\s*$""")
# `[label]: /path` or `[^1]: text`
FOOTNOTE_DEF_RE = re.compile(r"^\s*\[\^?[^\]]+\]:[ \t]+")
TABLE_SEPARATOR_RE = re.compile(r"^\s*\|?\s*:?-{3,}:?\s*(\|\s*:?-{3,}:?\s*)+\|?\s*$")
TABLE_ROW_RE = re.compile(r"^\s*\|.*\|.*$")
# GFM rows may omit the outer pipes; only a table when a separator line is adjacent
PIPE_CELLS_RE = re.compile(r"^\s*[^|\s][^|]*\|")
# A list bullet followed by nothing but one link
LIST_LINK_ONLY_RE = re.compile(r"^\s*[-*]\s+\[[^\]]*\]\([^)]*\)\.?\s*$")
TRIPLE_COLON_RE = re.compile(r"^\s*:::")
XML_TAG_ONLY_RE = re.compile(r"^\s*</?[a-zA-Z][a-zA-Z0-9\-]*(?:\s[^>]*)?/?>\s*$")
HTML_COMMENT_ONLY_RE = re.compile(r"^\s*<!--.*?-->\s*$")
# Thematic breaks and setext underlines
RULE_RE = re.compile(r"^ {0,3}(?:([-*_])(?:[ \t]*\1){2,}|=+)[ \t]*$")


@dataclass(frozen=True)
class LineContext:
    type: str
    indent: str
    prefix: str
    content: str

    @property
    def prefix_width(self) -> int:
        return len(self.indent) + (len(self.prefix) + 1 if self.prefix else 0)


def classify_line(text: str) -> LineContext:
    m = _list_re.match(text)
    if m:
        return LineContext(LIST, m.group(1), m.group(2), m.group(3))
    m = _blockquote_re.match(text)
    if m:
        return LineContext(BLOCKQUOTE, m.group(1), m.group(2), m.group(3))
    indent = _indent_re.match(text).group(1)
    return LineContext(PARAGRAPH, indent, "", text.strip())


def is_heading(text: str) -> bool:
    return ATX_HEADING_RE.match(text) is not None


def is_import(text: str) -> bool:
    return IMPORT_RE.match(text) is not None


def is_footnote_def(text: str) -> bool:
    return FOOTNOTE_DEF_RE.match(text) is not None


def is_table_separator(text: str) -> bool:
    return TABLE_SEPARATOR_RE.match(text) is not None


def is_table_line(text: str) -> bool:
    return is_table_separator(text) or TABLE_ROW_RE.match(text) is not None


def has_pipe_cells(text: str) -> bool:
    return is_table_line(text) or PIPE_CELLS_RE.match(text) is not None


def is_list_link_only(text: str) -> bool:
    return LIST_LINK_ONLY_RE.match(text) is not None


def is_triple_colon(text: str) -> bool:
    return TRIPLE_COLON_RE.match(text) is not None


def is_tag_only(text: str) -> bool:
    return XML_TAG_ONLY_RE.match(text) is not None or HTML_COMMENT_ONLY_RE.match(text) is not None


def is_rule(text: str) -> bool:
    return RULE_RE.match(text) is not None


def is_standalone(text: str) -> bool:
    """Lines that always form a unit of their own."""
    return is_heading(text) or is_tag_only(text) or is_triple_colon(text) or is_rule(text)
