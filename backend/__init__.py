from .board import Cell, MinesweeperBoard
from .game import GameSession, GameStatus, cell_text
from .levels import BEGINNER, EXPERT, INTERMEDIATE, LEVELS, Level, get_level

__all__ = [
    "Cell",
    "MinesweeperBoard",
    "GameSession",
    "GameStatus",
    "cell_text",
    "Level",
    "LEVELS",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "get_level",
]
