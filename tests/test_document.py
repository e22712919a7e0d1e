from mdreflow.document import Edit, TextBuffer, apply_edits


def test_from_text_tracks_lines_and_newline_style():
    buf = TextBuffer.from_text("a\r\n  b\r\n")
    assert buf.lines == ("a", "  b")
    assert buf.newline == "\r\n"
    assert buf.trailing_newline
    assert buf.first_non_whitespace(1) == 2
    assert buf.to_text() == "a\r\n  b\r\n"


def test_empty_and_blank_documents():
    assert TextBuffer.from_text("").line_count == 0
    buf = TextBuffer.from_text("\n")
    assert buf.lines == ("",)
    assert buf.is_blank(0)
    assert buf.to_text() == "\n"


def test_apply_edits_bottom_up():
    buf = TextBuffer.from_text("one\ntwo\nthree\nfour")
    result = apply_edits(buf, [Edit(0, 1, "one two"), Edit(3, 3, "4\n4")])
    assert result.text == "one two\nthree\n4\n4"
    assert result.edits_applied == 2
    assert result.lines_changed == [0, 1, 3]


def test_mixed_line_endings_round_trip():
    text = "short\r\n\r\nalso short\n"
    buf = TextBuffer.from_text(text)
    assert buf.lines == ("short", "", "also short")
    assert buf.endings == ("\r\n", "\r\n", "\n")
    assert buf.newline == "\r\n"
    assert buf.to_text() == text
    assert apply_edits(buf, []).text == text


def test_missing_final_newline_is_kept():
    buf = TextBuffer.from_text("a\nb")
    assert not buf.trailing_newline
    assert buf.to_text() == "a\nb"


def test_apply_edits_keeps_untouched_line_endings():
    buf = TextBuffer.from_text("one two\r\nthree\nfour\n")
    result = apply_edits(buf, [Edit(0, 1, "one\ntwo three")])
    assert result.text == "one\r\ntwo three\nfour\n"
