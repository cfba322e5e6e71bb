import pytest
from boggle_solver.cli import main


@pytest.fixture
def files(tmp_path):
    dict_file = tmp_path / "dictionary.txt"
    dict_file.write_text("CAT\nCATS\nAT\nDO\nQUIZ\n")
    board_file = tmp_path / "board.txt"
    board_file.write_text("2 2\nC A\nT S\n")
    return dict_file, board_file


def test_score_mode(files, capsys):
    dict_file, board_file = files
    assert main([str(dict_file), str(board_file)]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "Score = 2"


def test_words_mode(files, capsys):
    dict_file, board_file = files
    assert main([str(dict_file), str(board_file), "--mode", "words"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split() for line in lines[:-1]] == [["1", "CAT"], ["1", "CATS"]]
    assert lines[-1] == "Score = 2"


def test_qu_board(files, tmp_path, capsys):
    dict_file, _ = files
    board_file = tmp_path / "board-q.txt"
    board_file.write_text("2 2\nQu I\nZ E\n")
    assert main([str(dict_file), str(board_file), "--mode", "words"]) == 0
    assert "QUIZ" in capsys.readouterr().out


def test_missing_dictionary(files, tmp_path, capsys):
    _, board_file = files
    assert main([str(tmp_path / "nope.txt"), str(board_file)]) == 1
    assert "Error" in capsys.readouterr().err


def test_malformed_board(files, tmp_path, capsys):
    dict_file, _ = files
    board_file = tmp_path / "bad.txt"
    board_file.write_text("3 3\nA B C\n")
    assert main([str(dict_file), str(board_file)]) == 1
    assert "Expected 9 tiles" in capsys.readouterr().err


def test_bad_mode_exits(files):
    dict_file, board_file = files
    with pytest.raises(SystemExit):
        main([str(dict_file), str(board_file), "--mode", "shout"])
