from __future__ import annotations

import re
from typing import List, Optional, Sequence

from ..config import ReflowConfig, WrapLongLinks
from ..document import TextBuffer, UnitExtent
from .lines import BLOCKQUOTE, LIST, LineContext, classify_line, is_rule


_sentence_end_re = re.compile(r"[.!?][\"'”’)\]]*$")
_link_re = re.compile(r"\[[^\]]*\]\([^)]*\)|<[a-zA-Z][a-zA-Z0-9+.\-]*:[^ >]*>|https?://")
# Words that would change the meaning of a line if they started it
_line_start_re = re.compile(r"^(?:[*\-+]|\d+\.|#{1,6}|>.*|\|.*|:::.*|<!--.*|</?[a-zA-Z][a-zA-Z0-9\-]*/?>?)$")


def is_link_word(word: str) -> bool:
    return _link_re.search(word) is not None


def ends_sentence(word: str) -> bool:
    return _sentence_end_re.search(word) is not None


def _unsafe_line_start(word: str) -> bool:
    return _line_start_re.match(word) is not None or is_rule(word)


def join_words(words: Sequence[str], config: ReflowConfig) -> str:
    if not words:
        return ""
    out = [words[0]]
    for prev, word in zip(words, words[1:]):
        out.append("  " if config.double_space_between_sentences and ends_sentence(prev) else " ")
        out.append(word)
    return "".join(out)


def _split_before(current: List[str], word: str) -> Optional[List[str]]:
    """Words for a new line starting at ``word``, borrowing from ``current`` if needed.

    None when no safe break point exists.
    """
    carry = [word]
    while _unsafe_line_start(carry[0]) and len(current) > 1:
        carry.insert(0, current.pop())
    if _unsafe_line_start(carry[0]):
        current.extend(carry)
        return None
    return carry


def fill_words(words: Sequence[str], width: int, config: ReflowConfig) -> List[str]:
    """Greedy fill of ``words`` into lines no wider than ``width`` where possible."""
    mode = config.wrap_long_links
    lines: List[List[str]] = []
    current: List[str] = []
    glue_next = False

    for word in words:
        long_link = len(word) > width and is_link_word(word)
        if not current:
            if lines and _unsafe_line_start(word):
                current = lines.pop()
                current.append(word)
            else:
                current = [word]
        elif glue_next or (long_link and mode is WrapLongLinks.OVERFLOW):
            current.append(word)
        elif len(join_words(current + [word], config)) <= width:
            current.append(word)
        else:
            carry = _split_before(current, word)
            if carry is not None:
                lines.append(current)
                current = carry
        glue_next = False

        if long_link:
            if mode is WrapLongLinks.BREAK_BEFORE:
                glue_next = True
            else:
                lines.append(current)
                current = []

    if current:
        lines.append(current)
    return [join_words(line, config) for line in lines]


def attach_prefix(context: LineContext, index: int, text: str) -> str:
    if context.type == LIST:
        if index == 0:
            return f"{context.indent}{context.prefix} {text}"
        return f"{context.indent}{' ' * (len(context.prefix) + 1)}{text}"
    if context.type == BLOCKQUOTE:
        return f"{context.indent}{context.prefix} {text}"
    return f"{context.indent}{text}"


def reflow_unit(buffer: TextBuffer, extent: UnitExtent, config: ReflowConfig) -> str:
    original = buffer.text_between(extent.start, extent.end)
    if extent.size <= 0:
        return original

    context = classify_line(buffer.line(extent.start))
    contents = [classify_line(buffer.line(i)).content for i in range(extent.start, extent.end + 1)]
    words = " ".join(contents).strip().split()
    if not words:
        # Nothing to wrap: empty quote markers and bare bullets stay as they are
        return original

    width = max(1, config.preferred_line_length - context.prefix_width)
    lines = fill_words(words, width, config)
    return "\n".join(attach_prefix(context, i, text) for i, text in enumerate(lines))
