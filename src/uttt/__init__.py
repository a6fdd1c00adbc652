from .game import Board, GlobalBoard, LocalBoard, OutOfRangeError, Player, Position

__version__ = "0.1.0"
