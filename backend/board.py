# backend/board.py

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .levels import Level
from .utils import MINE, format_board, get_neighbors, mine_mask, neighbor_mine_counts

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    value: int = 0  # -1 = mine, 0-8 = adjacent mine count
    revealed: bool = False
    flagged: bool = False

    @property
    def is_mine(self) -> bool:
        return self.value == MINE


class MinesweeperBoard:
    """
    A rows x cols grid of cells with mines placed and adjacent counts filled in.

    Every operation on the board is a silent no-op when it does not apply
    (coordinates off the grid, revealing a flagged cell, flagging a revealed
    one). Operations that can uncover a mine return True when they did.
    """

    def __init__(self, level: Level, cells: List[List[Cell]]):
        self.level = level
        self.rows = level.rows
        self.cols = level.cols
        self.cells = cells

    @classmethod
    def empty(cls, level: Level) -> "MinesweeperBoard":
        cells = [[Cell() for _ in range(level.cols)] for _ in range(level.rows)]
        return cls(level, cells)

    @classmethod
    def generate(cls, level: Level, rng: Optional[random.Random] = None) -> "MinesweeperBoard":
        """
        Build a new board for `level` with mines at random distinct cells.

        Positions are drawn uniformly and redrawn when they land on a mine
        already placed. Level validation guarantees at least one free cell,
        so the redraw loop ends.
        """
        rng = rng or random.Random()
        board = cls.empty(level)
        for _ in range(level.mine_count):
            while True:
                row = rng.randrange(level.rows)
                col = rng.randrange(level.cols)
                if not board.cells[row][col].is_mine:
                    break
            board._place_mine(row, col)
        logger.debug("Generated %s board %dx%d with %d mines",
                     level.name, level.rows, level.cols, level.mine_count)
        return board

    @classmethod
    def from_layout(cls, level: Level, mines: Iterable[Tuple[int, int]]) -> "MinesweeperBoard":
        """
        Build a board with mines at exactly the given coordinates.
        """
        mines = set(mines)
        if len(mines) != level.mine_count:
            raise ValueError(
                f"{level.name} level expects {level.mine_count} mines, got {len(mines)}"
            )
        for r, c in mines:
            if not (0 <= r < level.rows and 0 <= c < level.cols):
                raise ValueError(f"Mine position {(r, c)} is outside the board")

        values = neighbor_mine_counts(mine_mask(level.rows, level.cols, mines))
        cells = [[Cell(int(values[r, c])) for c in range(level.cols)] for r in range(level.rows)]
        return cls(level, cells)

    def _place_mine(self, row: int, col: int):
        self.cells[row][col].value = MINE
        for nr, nc in self.neighbors(row, col):
            neighbor = self.cells[nr][nc]
            if not neighbor.is_mine:
                neighbor.value += 1

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def in_bounds(self, row, col) -> bool:
        try:
            row = int(row)
            col = int(col)
        except (ValueError, TypeError):
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Optional[Cell]:
        if not self.in_bounds(row, col):
            return None
        return self.cells[int(row)][int(col)]

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        return get_neighbors(row, col, self.rows, self.cols)

    def count_adjacent_flags(self, row: int, col: int) -> int:
        return sum(1 for nr, nc in self.neighbors(row, col) if self.cells[nr][nc].flagged)

    def mine_positions(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if self.cells[r][c].is_mine
        ]

    def revealed_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.revealed)

    def flag_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.flagged)

    def is_complete(self) -> bool:
        """True once every non-mine cell has been revealed."""
        for row in self.cells:
            for cell in row:
                if not cell.is_mine and not cell.revealed:
                    return False
        return True

    @property
    def values(self) -> List[List[int]]:
        return [[cell.value for cell in row] for row in self.cells]

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a hidden, unflagged cell.

        - a mine is revealed and True is returned
        - a number is revealed on its own
        - a 0 opens the surrounding region: every connected 0 cell and the
          numbered cells bordering it. Flagged cells stay closed and mines
          are never opened by the flood.

        Returns True if a mine was revealed.
        """
        if not self.in_bounds(row, col):
            return False
        row, col = int(row), int(col)
        cell = self.cells[row][col]
        if cell.revealed or cell.flagged:
            return False

        cell.revealed = True
        if cell.is_mine:
            return True
        if cell.value == 0:
            self._flood_reveal(row, col)
        return False

    def _flood_reveal(self, row: int, col: int):
        # The revealed flag doubles as the visited set.
        stack = [(row, col)]
        opened = 0
        while stack:
            r, c = stack.pop()
            for nr, nc in self.neighbors(r, c):
                neighbor = self.cells[nr][nc]
                if neighbor.revealed or neighbor.flagged or neighbor.is_mine:
                    continue
                neighbor.revealed = True
                opened += 1
                if neighbor.value == 0:
                    stack.append((nr, nc))
        logger.debug("Cascade from (%d, %d) opened %d cells", row, col, opened)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Flip the flag on a hidden cell. Returns True if the flag changed.
        """
        cell = self.cell(row, col)
        if cell is None or cell.revealed:
            return False
        cell.flagged = not cell.flagged
        return True

    def chord(self, row: int, col: int) -> bool:
        """
        Reveal every neighbor of a revealed cell once the player has placed
        as many flags around it as its number says.

        A wrongly placed flag means a mine is among the revealed neighbors;
        returns True in that case.
        """
        cell = self.cell(row, col)
        if cell is None or not cell.revealed:
            return False
        row, col = int(row), int(col)
        if self.count_adjacent_flags(row, col) != cell.value:
            return False

        mine_hit = False
        for nr, nc in self.neighbors(row, col):
            if self.reveal(nr, nc):
                mine_hit = True
        return mine_hit

    def __str__(self):
        revealed = [[cell.revealed for cell in row] for row in self.cells]
        flags = [[cell.flagged for cell in row] for row in self.cells]
        return format_board(self.values, revealed, flags)
