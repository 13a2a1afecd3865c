"""
Difficulty presets for Minesweeper.

A difficulty fully determines board geometry and mine count for a session.
"""
from dataclasses import dataclass
from typing import Dict


# ============================================================================
# Difficulty Configuration
# ============================================================================

@dataclass(frozen=True)
class Difficulty:
    """
    Immutable board configuration.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines placed on the first reveal.
        label: Human-readable name.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10
    label: str = "Custom"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        # The first revealed cell is always kept free.
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cell_count(self) -> int:
        """Number of cells a player must reveal to win."""
        return self.cell_count - self.mines


# Preset difficulty levels
BEGINNER = Difficulty(9, 9, 10, "Beginner")
INTERMEDIATE = Difficulty(16, 16, 40, "Intermediate")
EXPERT = Difficulty(16, 30, 99, "Expert")

DIFFICULTIES: Dict[str, Difficulty] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def get_difficulty(name: str) -> Difficulty:
    """
    Look up a preset by key (case-insensitive).

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(DIFFICULTIES))
        raise KeyError(f"Unknown difficulty {name!r} (choose from {choices})") from None
