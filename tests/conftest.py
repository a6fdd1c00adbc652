import pytest

from uttt.game.rules import Player, Position, to_position


def _load_board(board, s):
    # 9个字符，行优先: 'X' / 'O' / 其他为空
    assert len(s) == 9
    for i, c in enumerate(s):
        if c == "X":
            board.set_cell(to_position(i), Player.X)
        elif c == "O":
            board.set_cell(to_position(i), Player.O)
        else:
            board.set_cell(to_position(i), None)
    return board


def _positions(pairs):
    return {Position(r, c) for r, c in pairs}


def _grid(rows, cols, corner=(0, 0)):
    return {Position(corner[0] + r, corner[1] + c) for r in range(rows) for c in range(cols)}


@pytest.fixture
def load_board():
    return _load_board


@pytest.fixture
def positions():
    return _positions


@pytest.fixture
def grid():
    return _grid
