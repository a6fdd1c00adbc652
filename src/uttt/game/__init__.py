from .board import Board, GlobalBoard, LocalBoard, SEND_RULES
from .rules import OutOfRangeError, Player, Position
