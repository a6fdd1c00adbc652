import enum
import numbers
from dataclasses import dataclass

import numpy as np


# 小棋盘与大棋盘共用同一套3x3赢法索引: 行3, 列3, 对角2
WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),  # diagonals
]

# 幻方权重：任意一条赢法上的三个权重之和都相同
# 格子编码：空 = 0, O = +权重, X = -权重
VALUES = np.array([4, 9, 2, 3, 5, 7, 8, 1, 6], dtype=np.int8)

# 幻方常数，由权重表推出(=15)
MAGIC_SUM = int(VALUES[list(WIN_LINES[0])].sum())

LOCAL_SIZE = 3
GLOBAL_SIZE = LOCAL_SIZE * LOCAL_SIZE


class OutOfRangeError(IndexError):
    pass


class Player(enum.Enum):
    # 枚举值即符号
    O = 1
    X = -1


def _as_int(value, name):
    # bool 也是 Integral，这里单独排除；numpy 整数统一转成 int
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Position {name} must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True, eq=False)
class Position:
    """
    棋盘坐标 (row, col)，不可变，可作为集合元素。
    既可以表示9x9全局坐标，也可以表示3x3局部坐标或子棋盘坐标。
    """

    row: int
    col: int

    def __post_init__(self):
        object.__setattr__(self, "row", _as_int(self.row, "row"))
        object.__setattr__(self, "col", _as_int(self.col, "col"))

    @classmethod
    def coerce(cls, value):
        # 接受 Position 或 (row, col) 元组
        if isinstance(value, Position):
            return value
        try:
            row, col = value
        except (TypeError, ValueError):
            raise TypeError(f"Cannot convert {value!r} to Position") from None
        return cls(row, col)

    def __add__(self, other):
        other = Position.coerce(other)
        return Position(self.row + other.row, self.col + other.col)

    def __sub__(self, other):
        other = Position.coerce(other)
        return Position(self.row - other.row, self.col - other.col)

    def __mul__(self, k):
        return Position(self.row * k, self.col * k)

    __rmul__ = __mul__

    def __floordiv__(self, k):
        return Position(self.row // k, self.col // k)

    def __iter__(self):
        yield self.row
        yield self.col

    def __eq__(self, other):
        if isinstance(other, Position):
            return self.row == other.row and self.col == other.col
        if isinstance(other, tuple):
            return (self.row, self.col) == other
        return NotImplemented

    def __hash__(self):
        return hash((self.row, self.col))

    def __repr__(self):
        return f"Position({self.row}, {self.col})"

def to_index(pos):
    # 行优先: index = row * 3 + col
    pos = Position.coerce(pos)
    return pos.row * LOCAL_SIZE + pos.col


def to_position(index):
    return Position(index // LOCAL_SIZE, index % LOCAL_SIZE)


def corner_of(pos):
    # 所在3x3块的左上角
    pos = Position.coerce(pos)
    return pos // LOCAL_SIZE * LOCAL_SIZE


def split_position(pos):
    """
    将全局坐标分解为 (子棋盘编号, 子棋盘内偏移)。
    :param pos: 9x9 全局坐标
    :return: (board_index 0~8, 局部 Position)
    """
    pos = Position.coerce(pos)
    corner = corner_of(pos)
    return to_index(corner // LOCAL_SIZE), pos - corner


def join_position(board_index, offset):
    # split_position 的逆运算
    return to_position(board_index) * LOCAL_SIZE + offset


def check_range(pos, size):
    pos = Position.coerce(pos)
    if not (0 <= pos.row < size and 0 <= pos.col < size):
        raise OutOfRangeError(f"{pos!r} is outside a {size}x{size} board")
    return pos


def weight_for(index):
    return int(VALUES[index])


def sign_of(player):
    return player.value


def player_of_sign(value):
    # 正 -> O, 负 -> X, 0 -> None
    if value > 0:
        return Player.O
    if value < 0:
        return Player.X
    return None


def winner_at_line(values, line):
    # 三个格子之和的绝对值等于幻方常数，当且仅当同一玩家占满这条线
    total = int(np.sum(np.asarray(values)[list(line)], dtype=np.int64))
    if abs(total) == MAGIC_SUM:
        return player_of_sign(total)
    return None


def winner_of(values):
    # 依次检查8条赢法，遇到第一条即返回
    for line in WIN_LINES:
        player = winner_at_line(values, line)
        if player is not None:
            return player
    return None
