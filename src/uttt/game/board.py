import logging
from abc import ABC, abstractmethod

import numpy as np

from .rules import (
    GLOBAL_SIZE,
    LOCAL_SIZE,
    check_range,
    join_position,
    player_of_sign,
    sign_of,
    split_position,
    to_index,
    to_position,
    weight_for,
    winner_of,
)

logger = logging.getLogger(__name__)

# 落子后对手被送往哪个子棋盘：
#   "played": 刚刚落子的那个子棋盘
#   "cell":   与落子小格同位置的子棋盘（标准规则），目标已决出胜负时不限制
SEND_RULES = ("played", "cell")
DEFAULT_SEND_RULE = "played"


class Board(ABC):
    """
    LocalBoard 与 GlobalBoard 共同的接口。
    格子内容用 Player 或 None 表示。
    """

    size = LOCAL_SIZE

    @abstractmethod
    def winner(self):
        ...

    @abstractmethod
    def set_cell(self, pos, player):
        ...

    @abstractmethod
    def get_cell(self, pos):
        ...

    @abstractmethod
    def legal_moves(self):
        ...

    @abstractmethod
    def is_finished(self):
        ...


class LocalBoard(Board):
    def __init__(self):
        # cells: shape=(9,), int8, 行优先
        # 每格为 0 或 ±VALUES[i]
        self.cells = np.zeros(LOCAL_SIZE * LOCAL_SIZE, dtype=np.int8)

    def winner(self):
        return winner_of(self.cells)

    def set_cell(self, pos, player):
        # 不检查是否已被占用，直接覆盖
        index = to_index(check_range(pos, self.size))
        if player is None:
            self.cells[index] = 0
        else:
            self.cells[index] = weight_for(index) * sign_of(player)

    def get_cell(self, pos):
        index = to_index(check_range(pos, self.size))
        return player_of_sign(self.cells[index])

    def legal_moves(self):
        # 每次调用都重新计算空格
        empty = np.flatnonzero(self.cells == 0)
        return (to_position(int(i)) for i in empty)

    def is_finished(self):
        # FIXME: 只有9格全部为 O 时才为 True。
        # 平局、X 占满或仍有空格都返回 False，调用方不要把它当作"棋盘已满"
        return bool(np.all(self.cells > 0))

    def __repr__(self):
        marks = "".join(
            "." if v == 0 else player_of_sign(v).name for v in self.cells
        )
        return f"LocalBoard({marks!r})"


class GlobalBoard(Board):
    size = GLOBAL_SIZE

    def __init__(self, send_rule=DEFAULT_SEND_RULE):
        if send_rule not in SEND_RULES:
            raise ValueError(f"Unknown send rule: {send_rule!r} (expected one of {SEND_RULES})")
        self.send_rule = send_rule
        self.boards = [LocalBoard() for _ in range(9)]
        # decided: 9个子棋盘的胜负结果，编码与小棋盘格子相同
        self.values = np.zeros(9, dtype=np.int8)
        # 当前必须下子的小棋盘编号，None 表示任意未决出的小棋盘
        self._next_board = None

    @classmethod
    def from_config(cls, config):
        rules = (config or {}).get("rules") or {}
        return cls(send_rule=rules.get("send_rule", DEFAULT_SEND_RULE))

    @property
    def next_board(self):
        return self._next_board

    @property
    def decided(self):
        return self.values.copy()

    def board(self, index):
        return self.boards[index]

    def winner(self):
        # 与小棋盘同一套算法，作用在9个子棋盘的结果上
        return winner_of(self.values)

    def set_cell(self, pos, player):
        pos = check_range(pos, self.size)
        index, offset = split_position(pos)
        board = self.boards[index]
        board.set_cell(offset, player)

        board_winner = board.winner()
        if board_winner is None:
            self.values[index] = 0
            self._next_board = self._send_target(index, offset)
        else:
            if self.values[index] == 0:
                logger.debug("Sub-board %d closed by %s at %r", index, board_winner.name, pos)
            self.values[index] = weight_for(index) * sign_of(board_winner)
            self._next_board = None
            winner = self.winner()
            if winner is not None:
                logger.debug("Global line completed by %s", winner.name)

        logger.debug("Next board after %r: %s", pos, self._next_board)

    def _send_target(self, index, offset):
        if self.send_rule == "played":
            return index
        target = to_index(offset)
        # 目标子棋盘已决出胜负则取消限制
        if self.values[target] != 0:
            return None
        return target

    def get_cell(self, pos):
        index, offset = split_position(check_range(pos, self.size))
        decided = player_of_sign(self.values[index])
        # 已决出的子棋盘直接返回结果，不再查看其中的格子
        if decided is not None:
            return decided
        return self.boards[index].get_cell(offset)

    def legal_moves(self):
        # 调用时即算出全部落子点，之后修改棋盘不影响返回的序列
        if self._next_board is not None:
            moves = self._moves_in([self._next_board])
            if moves:
                return iter(moves)
            # 强制小棋盘已下满但无人获胜，则允许任意未决出的小棋盘
        return iter(self._moves_in([i for i in range(9) if self.values[i] == 0]))

    def _moves_in(self, indexes):
        return [
            join_position(i, move)
            for i in indexes
            for move in self.boards[i].legal_moves()
        ]

    def is_finished(self):
        # FIXME: 与 LocalBoard.is_finished 相同，只有9个子棋盘都被 O 赢下时才为 True
        return bool(np.all(self.values > 0))

    def __repr__(self):
        return f"GlobalBoard(decided={self.values.tolist()}, next_board={self._next_board})"
