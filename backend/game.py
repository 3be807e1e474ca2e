# backend/game.py

import logging
import random
from enum import Enum

from .board import Cell, MinesweeperBoard
from .levels import EXPERT, LEVELS, Level, get_level

logger = logging.getLogger(__name__)

FLAG = "⚑"
BOMB = "●"


class GameStatus(str, Enum):
    PLAYING = "playing"
    DEAD = "dead"
    WON = "won"


def cell_text(cell: Cell, dead: bool) -> str:
    """
    What a cell shows on screen.

    Once the player is dead every mine shows the bomb, revealed or not.
    """
    if dead and cell.is_mine:
        return BOMB
    if cell.revealed:
        if cell.is_mine:
            return BOMB
        if cell.value == 0:
            return ""
        return str(cell.value)
    if cell.flagged:
        return FLAG
    return ""


class GameSession:
    """
    A wrapper around MinesweeperBoard that manages game status and the
    clicks coming from the page.
    """

    def __init__(self, level: Level = EXPERT, seed: int = None):
        self.seed = seed
        self.rng = random.Random(seed)
        self.level = level
        self.reset(level)

    def reset(self, level: Level = None):
        """
        Throw the current board away and start over, on `level` if given.
        """
        if level is not None:
            self.level = level
        self.board = MinesweeperBoard.generate(self.level, self.rng)
        self.status = GameStatus.PLAYING
        logger.debug("Dealt %s board from seed %s", self.level.name, self.seed)
        logger.info("New %s game (%dx%d, %d mines)", self.level.name,
                    self.level.rows, self.level.cols, self.level.mine_count)

    @property
    def dead(self) -> bool:
        return self.status == GameStatus.DEAD

    @property
    def won(self) -> bool:
        return self.status == GameStatus.WON

    def is_game_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    # ------------------------------------------------------------------
    # Board operations
    # ------------------------------------------------------------------

    def reveal(self, row: int, col: int):
        if self.is_game_over():
            return
        self._settle(self.board.reveal(row, col), row, col)

    def toggle_flag(self, row: int, col: int):
        if self.is_game_over():
            return
        self.board.toggle_flag(row, col)

    def chord(self, row: int, col: int):
        if self.is_game_over():
            return
        self._settle(self.board.chord(row, col), row, col)

    def _settle(self, mine_hit: bool, row: int, col: int):
        if mine_hit:
            self.status = GameStatus.DEAD
            logger.info("Mine hit at (%s, %s)", row, col)
        elif self.board.is_complete():
            self.status = GameStatus.WON
            logger.info("Board cleared")

    # ------------------------------------------------------------------
    # Page actions
    # ------------------------------------------------------------------

    def select_level(self, level_index: int):
        self.reset(get_level(level_index))

    def new_game(self):
        self.reset()

    def primary_click(self, row: int, col: int):
        cell = self.board.cell(row, col)
        if cell is None:
            return
        if cell.revealed:
            self.chord(row, col)
        else:
            self.reveal(row, col)

    def secondary_click(self, row: int, col: int):
        self.toggle_flag(row, col)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def level_index(self) -> int:
        return LEVELS.index(self.level) if self.level in LEVELS else -1

    def get_state(self) -> dict:
        """
        Return the visible board and game status.
        """
        dead = self.dead
        cells = [
            [
                {
                    "text": cell_text(cell, dead),
                    "revealed": cell.revealed,
                    "flagged": cell.flagged,
                }
                for cell in row
            ]
            for row in self.board.cells
        ]
        return {
            "cells": cells,
            "rows": self.level.rows,
            "cols": self.level.cols,
            "mine_count": self.level.mine_count,
            "level": self.level_index,
            "level_name": self.level.name,
            "status": self.status.value,
            "dead": dead,
            "won": self.won,
            "flags": self.board.flag_count(),
        }
