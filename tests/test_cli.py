import pytest

from wordlesolver.__main__ import main


def test_next(words_file, capsys):
    assert main(["--words", str(words_file), "-q", "next"]) == 0
    assert capsys.readouterr().out == "fgxyz\n"


def test_next_with_board(words_file, tmp_path, capsys):
    board = tmp_path / "board.txt"
    board.write_text("abcde ggggb\n")
    assert main(["--words", str(words_file), "-q", "next", str(board)]) == 0
    assert capsys.readouterr().out == "abcdf\n"


def test_rank(words_file, capsys):
    assert main(["--words", str(words_file), "-q", "rank", "--workers", "1", "--top", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["fgxyz", "abcde"]


def test_play(words_file, capsys):
    assert main(["--words", str(words_file), "-q", "play", "abcdg", "--opener", "fgxyz"]) == 0
    assert capsys.readouterr().out == "fgxyz,abcdg\n"


def test_selfplay(words_file, capsys):
    assert main(["--words", str(words_file), "-q", "selfplay", "--workers", "1",
                 "--opener", "fgxyz"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "abcde:fgxyz,abcde",
        "abcdf:fgxyz,abcdf",
        "abcdg:fgxyz,abcdg",
        "fgxyz:fgxyz",
    ]


def test_selfplay_summary(words_file, tmp_path, capsys):
    log_dir = tmp_path / "logs"
    assert main(["--words", str(words_file), "-q", "selfplay", "--workers", "1",
                 "--summary", "--log-dir", str(log_dir)]) == 0
    assert (log_dir / "selfplay_results.json").exists()


def test_missing_dictionary(tmp_path, capsys):
    assert main(["--words", str(tmp_path / "missing.txt"), "next"]) == 1
    assert "error: file not found" in capsys.readouterr().err


def test_malformed_board(words_file, tmp_path, capsys):
    board = tmp_path / "board.txt"
    board.write_text("abcde gggg\n")
    assert main(["--words", str(words_file), "next", str(board)]) == 1
    assert "board line 1 is malformed" in capsys.readouterr().err


def test_invalid_answer(words_file, capsys):
    assert main(["--words", str(words_file), "-q", "play", "abc"]) == 1
    assert "unexpected word length" in capsys.readouterr().err


def test_unreadable_dictionary(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_bytes(b"\xff\xfe\xfa\n")
    assert main(["--words", str(path), "next"]) == 1
    assert "error: failed to read" in capsys.readouterr().err


def test_rank_rejects_negative_top(words_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--words", str(words_file), "-q", "rank", "--top", "-1"])
    assert exc.value.code == 2
    assert "must be 0 or more" in capsys.readouterr().err


def test_rank_excluding_all_correct(words_file, capsys):
    assert main(["--words", str(words_file), "-q", "--exclude-all-correct",
                 "rank", "--workers", "1", "--top", "1"]) == 0
    word, cost = capsys.readouterr().out.strip().split(": ")
    assert word == "fgxyz"
    assert float(cost) == pytest.approx(3 - 9 / 242)


def test_next_excluding_all_correct(words_file, capsys):
    assert main(["--words", str(words_file), "-q", "--exclude-all-correct", "next"]) == 0
    assert capsys.readouterr().out == "fgxyz\n"
