from mdreflow.detect.expressions import find_bracket_expressions
from mdreflow.detect.structure import DocumentStructure
from mdreflow.document import TextBuffer


def _spans(text):
    structure = DocumentStructure.scan(TextBuffer.from_text(text))
    return [(r.start, r.end) for r in structure.expressions]


def test_single_line_expression():
    assert _spans("Text {props.x} here\nMore text\n") == [(0, 0)]


def test_multi_line_expression():
    text = "<Tabs\n  items={{\n    a: 1,\n  }}\n/>\n\nText\n"
    assert _spans(text) == [(1, 3)]


def test_braces_in_inline_code_are_ignored():
    assert _spans("Use `{` to open a block\n") == []


def test_inline_code_closes_on_run_at_least_as_long():
    assert _spans("Use ``a ` {b`` here\n") == []
    assert _spans("Use `a` {b} here\n") == [(0, 0)]


def test_unterminated_expression_runs_to_end():
    assert _spans("a {\nb\nc\n") == [(0, 2)]


def test_fence_closes_open_expression():
    text = "a {\nb\n```\ncode }\n```\nc\n"
    assert _spans(text) == [(0, 1)]


def test_stray_closing_brace_floors_at_zero():
    assert _spans("} stray\ntext {x}\n") == [(1, 1)]


def test_front_matter_braces_are_ignored():
    buf = TextBuffer.from_text("---\ntags: {a: b}\n---\ntext\n")
    structure = DocumentStructure.scan(buf)
    assert find_bracket_expressions(buf, structure.fenced, structure.front_matter) == []


def test_empty_buffer_has_no_ranges():
    structure = DocumentStructure.scan(TextBuffer.from_text(""))
    assert structure.all_ranges() == []
