import io
from pathlib import Path

import pytest
from apps.cli import run


@pytest.fixture
def words(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("cab\ncat\ncats\ndog\n", encoding="utf-8")
    return str(p)


def test_single_pattern(words, capsys):
    run.main(["-s", "xyz", "-p", "cat", words])
    assert capsys.readouterr().out == "6\tcat\n"


def test_interactive_patterns_until_eof(words, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("cat\nca_\neof\ndog\n"))
    run.main(["-s", "s", "-i", "--sort", words])
    out = capsys.readouterr().out.splitlines()
    assert out == ["9\tcab", "7\tcats", "7\tcats", "6\tcat", "6\tcat"]


def test_read_patterns_stops_at_eof():
    assert run.read_patterns(["a.\n", "_b\r\n", "eof\n", "c\n"]) == ["a.", "_b"]
    assert run.read_patterns(["a.\n", "eofx\n"]) == ["a.", "eofx"]


@pytest.mark.parametrize("argv", [
    ["-p", "cat"],                 # no shelf
    ["-s", "abc"],                 # no pattern, no -i
    ["-s", "abc", "-p", ""],       # empty pattern
    ["-s", "abc", "-p", "cat", "-i"],
])
def test_usage_errors_exit_2(argv, words):
    with pytest.raises(SystemExit) as e:
        run.main(argv + [words])
    assert e.value.code == 2


@pytest.mark.parametrize("argv", [
    ["-s", "abc", "-p", "cat", "missing-words.txt"],
    ["-s", "ABC", "-p", "cat"],
    ["-s", "abc", "-p", "c*t"],
])
def test_fatal_errors_exit_1(argv, words, capsys):
    if argv[-1] != "missing-words.txt":
        argv = argv + [words]
    with pytest.raises(SystemExit) as e:
        run.main(argv)
    assert e.value.code == 1
    assert capsys.readouterr().out == ""


def test_undecodable_dictionary_line_is_skipped(tmp_path, capsys):
    p = tmp_path / "words.txt"
    p.write_bytes(b"cat\n\xc9mile\ndog\n")
    run.main(["-s", "xyz", "-p", "cat", str(p)])
    assert capsys.readouterr().out == "6\tcat\n"
