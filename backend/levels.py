# backend/levels.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    """
    Board dimensions and mine count for one difficulty.

    A level is rejected up front when its mines could not all be placed,
    since mine placement retries until it finds a free cell.
    """
    rows: int
    cols: int
    mine_count: int
    name: str = "Custom"

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        if self.mine_count >= self.cell_count:
            raise ValueError(
                f"Too many mines: {self.mine_count} mines need more than "
                f"{self.cell_count} cells"
            )

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "rows": self.rows,
            "cols": self.cols,
            "mine_count": self.mine_count,
        }


BEGINNER = Level(8, 8, 10, "Beginner")
INTERMEDIATE = Level(16, 16, 40, "Intermediate")
EXPERT = Level(16, 30, 99, "Expert")

LEVELS = (BEGINNER, INTERMEDIATE, EXPERT)


def get_level(index) -> Level:
    """Look up a preset by its index in LEVELS (0, 1 or 2)."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Level index must be an integer, got {index!r}")
    if not 0 <= index < len(LEVELS):
        raise ValueError(f"Unknown level index {index}; expected 0-{len(LEVELS) - 1}")
    return LEVELS[index]
