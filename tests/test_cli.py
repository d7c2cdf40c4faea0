import pytest

from pipex.cli import USAGE, main


@pytest.mark.parametrize("argv", [[], ["a"], ["a", "b", "c"], ["a", "b", "c", "d", "e"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 0
    assert USAGE.strip() in capsys.readouterr().err


def test_runs_pipeline(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_bytes(b"one\ntwo\n")
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_bytes() == infile.read_bytes()


def test_missing_infile(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    outfile = tmp_path / "out.txt"
    assert main([missing, "cat", "cat", str(outfile)]) == 1
    assert missing in capsys.readouterr().err
    assert outfile.exists()


def test_missing_second_command(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_bytes(b"data\n")
    status = main([str(infile), "cat", "no-such-tool-here", str(tmp_path / "out.txt")])
    assert status == 127
    assert "no-such-tool-here" in capsys.readouterr().err