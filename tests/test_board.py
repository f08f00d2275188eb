import io

import pytest

from roadlab.board import (
    State,
    cell_string,
    format_board,
    main,
    parse_int_line,
    parse_line,
    print_board,
    read_board_file,
    read_int_board_file,
    stream_int_char_pairs,
    stream_ints,
)

BOARD_TEXT = "0,1,0,0,0,0,\n0,1,0,0,0,0,\n0,0,0,1,1,0,\n"


@pytest.fixture
def board_file(tmp_path):
    path = tmp_path / "1.board"
    path.write_text(BOARD_TEXT, encoding="utf-8")
    return path


def test_stream_ints_whitespace_separated():
    assert list(stream_ints("1 2 3")) == [1, 2, 3]


def test_stream_ints_stops_at_non_integer():
    assert list(stream_ints("1,2,3")) == [1]


def test_stream_ints_empty():
    assert list(stream_ints("")) == []


def test_pairs_drop_trailing_number_without_char():
    assert list(stream_int_char_pairs("1,2,3")) == [(1, ","), (2, ",")]


def test_parse_int_line_with_trailing_comma():
    assert parse_int_line("0,1,0,0,0,0,") == [0, 1, 0, 0, 0, 0]


def test_parse_int_line_stops_at_other_separator():
    assert parse_int_line("1,0;1,") == [1]


def test_parse_line_maps_states():
    assert parse_line("0,1,0,") == [State.EMPTY, State.OBSTACLE, State.EMPTY]


def test_parse_line_skips_unknown_values():
    assert parse_line("0,5,1,") == [State.EMPTY, State.OBSTACLE]


def test_read_int_board_file_matches_lines(board_file):
    board = read_int_board_file(board_file)
    assert board == [parse_int_line(line) for line in BOARD_TEXT.splitlines()]
    assert len(board) == 3


def test_read_board_file_states(board_file):
    board = read_board_file(board_file)
    assert board[0][1] is State.OBSTACLE
    assert board[2][0] is State.EMPTY
    assert all(len(row) == 6 for row in board)


def test_missing_file_gives_empty_board(tmp_path):
    assert read_board_file(tmp_path / "absent.board") == []
    assert read_int_board_file(tmp_path / "absent.board") == []


def test_cell_string():
    assert cell_string(State.OBSTACLE) == "⛰   "
    assert cell_string(State.EMPTY) == "0   "


def test_format_board_states():
    board = [[State.EMPTY, State.OBSTACLE]]
    assert format_board(board) == cell_string(State.EMPTY) + cell_string(State.OBSTACLE) + "\n"


def test_format_board_ints_concatenates():
    assert format_board([[0, 1, 0], [1, 1, 0]]) == "010\n110\n"


def test_print_board_writes_format(board_file):
    board = read_board_file(board_file)
    out = io.StringIO()
    print_board(board, out)
    assert out.getvalue() == format_board(board)
    assert out.getvalue().count("\n") == len(board)


def test_main_prints_ints(board_file, capsys):
    assert main([str(board_file), "--ints"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "010000"