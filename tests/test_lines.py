from mdreflow.convert.lines import (
    BLOCKQUOTE,
    LIST,
    PARAGRAPH,
    classify_line,
    has_pipe_cells,
    is_footnote_def,
    is_heading,
    is_import,
    is_list_link_only,
    is_rule,
    is_table_separator,
    is_table_line,
    is_tag_only,
    is_triple_colon,
)


def test_classify_bullet_list_item():
    ctx = classify_line("  - some item text")
    assert (ctx.type, ctx.indent, ctx.prefix, ctx.content) == (LIST, "  ", "-", "some item text")
    assert ctx.prefix_width == 4


def test_classify_ordered_list_item():
    ctx = classify_line("12. twelfth")
    assert (ctx.type, ctx.prefix, ctx.content) == (LIST, "12.", "twelfth")


def test_bullet_needs_whitespace():
    assert classify_line("-not a list").type == PARAGRAPH
    assert classify_line("*emphasis* text").type == PARAGRAPH


def test_classify_blockquote():
    ctx = classify_line(">> nested quote")
    assert (ctx.type, ctx.prefix, ctx.content) == (BLOCKQUOTE, ">>", "nested quote")
    assert classify_line(">").content == ""


def test_classify_plain_paragraph():
    ctx = classify_line("    indented text  ")
    assert (ctx.type, ctx.indent, ctx.prefix, ctx.content) == (PARAGRAPH, "    ", "", "indented text")
    assert ctx.prefix_width == 4


def test_heading_lines():
    assert is_heading("# Title")
    assert is_heading("   ###### Six")
    assert is_heading("#")
    assert not is_heading("####### seven")
    assert not is_heading("    # indented code")
    assert not is_heading("#hashtag")


def test_import_lines():
    assert is_import('import Tabs from "@theme/Tabs";')
    assert is_import("import './styles.css'")
    assert is_import("import { a, b } from 'lib'")
    assert not is_import("import the data before running")


def test_footnote_and_reference_definitions():
    assert is_footnote_def("[^1]: The note.")
    assert is_footnote_def("[docs]: https://example.com")
    assert not is_footnote_def("[docs](https://example.com) is a link")


def test_table_lines():
    assert is_table_line("| a | b |")
    assert is_table_line("|:---|---:|")
    assert is_table_line("--- | ---")
    assert not is_table_line("a | b")


def test_pipe_cells_and_separators():
    assert has_pipe_cells("a | b")
    assert has_pipe_cells("| a | b |")
    assert not has_pipe_cells("no pipes here")
    assert is_table_separator("--- | :---:")
    assert not is_table_separator("---")


def test_list_link_only():
    assert is_list_link_only("- [Docs](https://example.com)")
    assert is_list_link_only("* [Docs](https://example.com).")
    assert not is_list_link_only("- [Docs](https://example.com) and more")


def test_container_tag_and_rule_lines():
    assert is_triple_colon(":::note")
    assert is_triple_colon("  :::")
    assert is_tag_only("<Tabs>")
    assert is_tag_only('  <TabItem value="a" label="A">')
    assert is_tag_only("</Tabs>")
    assert is_tag_only("<!-- comment -->")
    assert not is_tag_only("<b>bold</b> text")
    assert not is_tag_only("<https://example.com>")
    assert is_rule("---")
    assert is_rule("* * *")
    assert is_rule("====")
    assert not is_rule("-- x")
