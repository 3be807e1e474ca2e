# backend/utils.py

from typing import Iterable, List, Tuple

import numpy as np

NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),          (0, 1),
    (1, -1), (1, 0), (1, 1)
]

MINE = -1


def get_neighbors(row: int, col: int, rows: int, cols: int) -> List[Tuple[int, int]]:
    """
    Return a list of valid neighboring coordinates (8-way) for (row, col).
    """
    neighbors = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            neighbors.append((nr, nc))
    return neighbors


def mine_mask(rows: int, cols: int, mines: Iterable[Tuple[int, int]]) -> np.ndarray:
    """
    Boolean (rows, cols) array with True at every mine coordinate.
    """
    mask = np.zeros((rows, cols), dtype=bool)
    for r, c in mines:
        mask[r, c] = True
    return mask


def neighbor_mine_counts(mask: np.ndarray) -> np.ndarray:
    """
    Compute the board values for a mine mask in one pass.

    Mines come out as -1, every other cell as the number of mines among
    its 8 neighbors.
    """
    rows, cols = mask.shape
    padded = np.pad(mask.astype(np.int8), 1)
    counts = np.zeros((rows, cols), dtype=np.int8)
    for dr, dc in NEIGHBOR_OFFSETS:
        counts += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]
    counts[mask] = MINE
    return counts


def format_board(values: List[List[int]], revealed: List[List[bool]] = None, flags: List[List[bool]] = None) -> str:
    """
    Render a board as text for debugging, one line per row.

    Flagged cells read F and hidden ones ".", but only when those grids
    are passed; otherwise every value is printed, mines as "*".
    """
    lines = []
    for r in range(len(values)):
        row_str = ""
        for c in range(len(values[0])):
            if flags and flags[r][c]:
                row_str += " F "
            elif revealed and not revealed[r][c]:
                row_str += " . "
            elif values[r][c] == MINE:
                row_str += " * "
            else:
                row_str += f" {values[r][c]} "
        lines.append(row_str)
    return "\n".join(lines)
