from typer.testing import CliRunner

from mdreflow.cli import app


LONG = " ".join(f"word{i}" for i in range(30))


def test_version_flag():
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip()


def test_reflow_to_stdout(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text(LONG + "\n")
    result = CliRunner().invoke(app, [str(src), "--width", "40"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) > 1
    assert all(len(line) <= 40 for line in lines)
    assert src.read_text() == LONG + "\n"


def test_in_place(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text("# Title\n\n" + LONG + "\n")
    result = CliRunner().invoke(app, [str(src), "-i", "-w", "30"])
    assert result.exit_code == 0
    text = src.read_text()
    assert text.startswith("# Title\n\n")
    assert all(len(line) <= 30 for line in text.splitlines()[2:])


def test_output_file(tmp_path):
    src = tmp_path / "doc.md"
    dst = tmp_path / "out" / "doc.md"
    src.write_text(LONG + "\n")
    result = CliRunner().invoke(app, [str(src), "-o", str(dst)])
    assert result.exit_code == 0
    assert dst.read_text().split() == LONG.split()


def test_check_reports_pending_changes(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text(LONG + "\n")
    assert CliRunner().invoke(app, [str(src), "--check"]).exit_code == 1
    src.write_text("short\n")
    assert CliRunner().invoke(app, [str(src), "--check"]).exit_code == 0


def test_line_option_reflows_only_the_unit_under_the_cursor(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text(LONG + "\n\n" + LONG + "\n")
    result = CliRunner().invoke(app, [str(src), "--line", "3", "-i"])
    assert result.exit_code == 0
    lines = src.read_text().splitlines()
    assert lines[0] == LONG
    assert lines[2] != LONG


def test_lines_option(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text(LONG + "\n\n" + LONG + "\n")
    result = CliRunner().invoke(app, [str(src), "--lines", "1:1", "-i"])
    assert result.exit_code == 0
    assert src.read_text().splitlines()[-1] == LONG


def test_bad_line_range(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text("text\n")
    assert CliRunner().invoke(app, [str(src), "--lines", "3-4"]).exit_code == 2


def test_missing_file(tmp_path):
    result = CliRunner().invoke(app, [str(tmp_path / "nope.md")])
    assert result.exit_code == 1


def test_width_from_environment(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text(LONG + "\n")
    result = CliRunner().invoke(app, [str(src)], env={"MDREFLOW_PREFERRED_LINE_LENGTH": "20"})
    assert result.exit_code == 0
    assert all(len(line) <= 20 for line in result.output.strip().splitlines())


def test_invalid_environment_value(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text("text\n")
    result = CliRunner().invoke(app, [str(src)], env={"MDREFLOW_WRAP_LONG_LINKS": "never"})
    assert result.exit_code == 2
