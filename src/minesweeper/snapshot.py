"""
Read-only views of a game session.

Snapshots are what the presentation layer renders: they copy the cell
grid and derive display content, so later moves never change them.
"""
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .board import Board
from .cell import Cell, CellState
from .difficulty import Difficulty
from .state import GameState


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """Immutable copy of a cell with its derived display state."""

    is_mine: bool
    is_revealed: bool
    is_flagged: bool
    neighbor_count: int
    state: CellState
    content: str
    observation: int

    @classmethod
    def from_cell(cls, cell: Cell) -> "CellView":
        return cls(
            is_mine=cell.is_mine,
            is_revealed=cell.is_revealed,
            is_flagged=cell.is_flagged,
            neighbor_count=cell.neighbor_count,
            state=cell.state,
            content=cell.content,
            observation=cell.to_observation(),
        )


def _format_three_digits(value: int) -> str:
    return f"{value:03d}"


# ============================================================================
# Session Snapshot
# ============================================================================

@dataclass(frozen=True)
class SessionSnapshot:
    """
    Immutable view of a session after an operation.

    Attributes:
        state: Current game state.
        elapsed_seconds: Whole seconds on the game clock.
        mine_count: Mines on the board (per difficulty).
        mines_remaining: Mine count minus flags; may be negative.
        has_first_click_occurred: Whether mines have been placed.
        difficulty: Configuration of the session.
        cells: Row-major grid of cell views.
    """

    state: GameState
    elapsed_seconds: int
    mine_count: int
    mines_remaining: int
    has_first_click_occurred: bool
    difficulty: Difficulty
    cells: Tuple[Tuple[CellView, ...], ...]

    @classmethod
    def capture(
        cls,
        board: Board,
        state: GameState,
        elapsed_seconds: int,
        mines_remaining: int,
        has_first_click_occurred: bool,
        difficulty: Difficulty,
    ) -> "SessionSnapshot":
        cells = tuple(
            tuple(CellView.from_cell(board.get_cell(row, col)) for col in range(board.cols))
            for row in range(board.rows)
        )
        return cls(
            state=state,
            elapsed_seconds=elapsed_seconds,
            mine_count=difficulty.mines,
            mines_remaining=mines_remaining,
            has_first_click_occurred=has_first_click_occurred,
            difficulty=difficulty,
            cells=cells,
        )

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell(self, row: int, col: int) -> CellView:
        """Get the view of one cell."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Position ({row}, {col}) is outside {self.rows}x{self.cols} board"
            )
        return self.cells[row][col]

    def content_grid(self) -> List[List[str]]:
        """Display text for every cell."""
        return [[view.content for view in row] for row in self.cells]

    def format_counter(self) -> str:
        """Mines remaining as three digits, e.g. ``"010"`` or ``"-01"``."""
        return _format_three_digits(self.mines_remaining)

    def format_timer(self) -> str:
        """Elapsed seconds as three digits."""
        return _format_three_digits(self.elapsed_seconds)

    def get_observation(self) -> np.ndarray:
        """Grid as an int8 array (see ``Board.get_observation``)."""
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, views in enumerate(self.cells):
            for col, view in enumerate(views):
                obs[row, col] = view.observation
        return obs

    def render_text(self) -> str:
        """Render board as an ASCII grid for debugging."""
        lines = [
            f"{self.format_counter()}  {self.state.name}  {self.format_timer()}"
        ]
        for views in self.cells:
            row_str = ""
            for view in views:
                if view.state == CellState.HIDDEN:
                    row_str += "."
                else:
                    row_str += view.content or " "
                row_str += " "
            lines.append(row_str.rstrip())
        return "\n".join(lines)
