from typer.testing import CliRunner

from textflowed.cli import app
from textflowed.pipeline import RunConfig, run


def test_version_flag():
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip()


def test_reformats_stdin_to_stdout():
    runner = CliRunner()
    result = runner.invoke(app, [], input="hello \nworld\n")
    assert result.exit_code == 0
    assert result.output == "hello world\n"


def test_quote_flag_and_files(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out" / "quoted.txt"
    src.write_text("hi \nthere\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, [str(src), "-o", str(dst), "--quote"])
    assert result.exit_code == 0
    assert dst.read_text(encoding="utf-8") == "> hi there\n"


def test_widths_from_environment():
    runner = CliRunner()
    env = {"TEXTFLOWED_MAX_LENGTH": "20", "TEXTFLOWED_OPT_LENGTH": "10"}
    result = runner.invoke(app, [], input="one two three four five six\n", env=env)
    assert result.exit_code == 0
    assert result.output == "one two \nthree four \nfive six\n"


def test_invalid_widths_exit_with_error():
    runner = CliRunner()
    result = runner.invoke(app, ["--max-length", "10", "--opt-length", "20"], input="x\n")
    assert result.exit_code == 2


def test_missing_input_file_exits_with_error(tmp_path):
    runner = CliRunner()
    result = runner.invoke(app, [str(tmp_path / "nope.txt")])
    assert result.exit_code == 2


def test_pipeline_run_writes_file(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("> a \n> b\n", encoding="utf-8")
    written = run(RunConfig(input=src, output=dst, fixed=True))
    assert written.path == dst
    assert dst.read_text(encoding="utf-8") == ">  a  b\n"
    assert written.bytes_written == len(">  a  b\n")


def test_stdin_keeps_crlf_bytes():
    runner = CliRunner()
    result = runner.invoke(app, [], input=b"hi\r\nthere\n")
    assert result.exit_code == 0
    assert result.stdout_bytes == b"hi\r\nthere\n"


def test_stdin_and_stdout_use_encoding():
    runner = CliRunner()
    data = "café \nau lait\n".encode("latin-1")
    result = runner.invoke(app, ["--encoding", "latin-1"], input=data)
    assert result.exit_code == 0
    assert result.stdout_bytes == "café au lait\n".encode("latin-1")
