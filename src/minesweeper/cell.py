"""
Cell module for Minesweeper.

A cell carries its content (mine or neighbor count) and its visibility
(revealed and/or flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

FLAG_MARKER = "F"
MINE_MARKER = "*"


class CellState(Enum):
    """Visual state of a cell, derived from its flags."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been opened.
        is_flagged: Whether the player has marked the cell.
        neighbor_count: Mines in the 8-neighborhood (0-8). Only meaningful
            for non-mine cells, and fixed once mines are placed.
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_count: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was opened, False if it was already revealed
            or is flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def state(self) -> CellState:
        """Visual state; a flag wins over the revealed bit."""
        if self.is_flagged:
            return CellState.FLAGGED
        if self.is_revealed:
            return CellState.REVEALED
        return CellState.HIDDEN

    @property
    def content(self) -> str:
        """
        Text shown for this cell.

        Returns:
            FLAG_MARKER for a flagged cell, "" for a hidden cell,
            MINE_MARKER for a revealed mine, otherwise the neighbor count
            ("" when zero).
        """
        if self.is_flagged:
            return FLAG_MARKER
        if not self.is_revealed:
            return ""
        if self.is_mine:
            return MINE_MARKER
        return str(self.neighbor_count) if self.neighbor_count > 0 else ""

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor count
            9: Revealed mine
        """
        if self.is_flagged:
            return -2
        if not self.is_revealed:
            return -1
        if self.is_mine:
            return 9
        return self.neighbor_count
