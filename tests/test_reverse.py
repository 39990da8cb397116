import io

from unixtools.reverse import main, reverse_lines


def test_reverse_lines_strips_newlines_and_reverses():
    assert reverse_lines(["a\n", "b\n", "c"]) == ["c", "b", "a"]


def test_reverse_lines_empty():
    assert reverse_lines([]) == []


def test_reverse_lines_is_involution_on_stripped_lines():
    lines = ["first", "second", "third"]
    assert reverse_lines(reverse_lines(lines)) == lines


def test_reverse_lines_keeps_carriage_return():
    assert reverse_lines(["x\r\n"]) == ["x\r"]


def test_main_file_to_file(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("a\nb\nc\n")
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "c\nb\na\n"


def test_main_file_to_stdout(tmp_path, capsys):
    source = tmp_path / "in.txt"
    source.write_text("one\ntwo")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == "two\none\n"


def test_main_stdin_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\ny\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "y\nx\n"


def test_main_too_many_arguments(capsys):
    assert main(["a", "b", "c"]) == 1
    assert capsys.readouterr().err == "usage: reverse <input> <output>"


def test_main_same_input_and_output(tmp_path, capsys):
    path = str(tmp_path / "f.txt")
    assert main([path, path]) == 1
    assert capsys.readouterr().err == "Input and output file must differ"


def test_main_missing_input(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert main([missing]) == 1
    assert capsys.readouterr().err == f"error: cannot open file {missing}\n"