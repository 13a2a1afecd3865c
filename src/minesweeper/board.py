"""
Board module for Minesweeper.

Implements the grid of cells with mine placement, flood-fill revealing,
flagging, and the counts used for win detection.
"""
import logging
import random
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Holds a fixed ``rows x cols`` grid of cells. Mines are placed lazily
    through ``place_mines`` so the first revealed cell can be kept safe.
    The board is mutated in place and is meant to have a single owner.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Board dimensions must be positive")
        self.rows = rows
        self.cols = cols
        self._grid: List[List[Cell]] = []
        self._mine_count = 0
        self._init_grid()

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, mines={self._mine_count})"

    @classmethod
    def create_empty(cls, rows: int, cols: int) -> "Board":
        """Create a board with no mines and every cell hidden."""
        return cls(rows, cols)

    @classmethod
    def from_mine_positions(
        cls, rows: int, cols: int, positions: Iterable[Position]
    ) -> "Board":
        """
        Create a board with mines at fixed positions.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            positions: (row, col) positions that hold a mine.

        Returns:
            Board with neighbor counts already computed.
        """
        board = cls(rows, cols)
        for row, col in positions:
            board._check_position(row, col)
            cell = board._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                board._mine_count += 1
        board._calculate_neighbor_counts()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]
        self._mine_count = 0

    def place_mines(
        self,
        mine_count: int,
        excluded_row: int,
        excluded_col: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Place mines uniformly at random, keeping one cell free.

        Picks random cells and skips any that already hold a mine or are
        the excluded cell, until ``mine_count`` mines are down. Then
        computes neighbor counts for every safe cell.

        Args:
            mine_count: Number of mines to place.
            excluded_row: Row of the cell that must stay mine-free.
            excluded_col: Column of the cell that must stay mine-free.
            rng: Random source (default: module-level ``random``).

        Raises:
            ValueError: If the count cannot fit or mines were already placed.
            IndexError: If the excluded cell is outside the board.
        """
        self._check_position(excluded_row, excluded_col)
        if self._mine_count:
            raise ValueError("Mines have already been placed on this board")
        if mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

        randrange = (rng or random).randrange
        placed = 0
        while placed < mine_count:
            row = randrange(self.rows)
            col = randrange(self.cols)
            if (row, col) == (excluded_row, excluded_col):
                continue
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            cell.is_mine = True
            placed += 1

        self._mine_count = mine_count
        self._calculate_neighbor_counts()
        logger.debug(
            "Placed %d mines on %dx%d board avoiding (%d, %d)",
            mine_count, self.rows, self.cols, excluded_row, excluded_col,
        )

    def _calculate_neighbor_counts(self) -> None:
        """Calculate neighbor mine counts for all safe cells."""
        for row in range(self.rows):
            for col in range(self.cols):
                cell = self._grid[row][col]
                if not cell.is_mine:
                    cell.neighbor_count = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_position(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Position ({row}, {col}) is outside {self.rows}x{self.cols} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> List[Position]:
        """
        Reveal a cell and flood-fill across zero-count cells.

        A revealed safe cell with no adjacent mines opens its neighbors,
        repeating until the region is bordered by numbered cells. Flagged
        cells are never opened by the fill. A mine is opened only when it
        is the target itself.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Positions revealed by this call, target first. Empty if the
            target was already revealed or is flagged.
        """
        self._check_position(row, col)
        revealed: List[Position] = []
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue
            revealed.append((current_row, current_col))
            if cell.is_mine or cell.neighbor_count > 0:
                continue
            for neighbor in self.get_neighbors(current_row, current_col):
                neighbor_cell = self._grid[neighbor[0]][neighbor[1]]
                if not neighbor_cell.is_revealed and not neighbor_cell.is_flagged:
                    stack.append(neighbor)

        if len(revealed) > 1:
            logger.debug(
                "Flood fill from (%d, %d) revealed %d cells", row, col, len(revealed)
            )
        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False if the cell is revealed.
        """
        self._check_position(row, col)
        return self._grid[row][col].toggle_flag()

    def reveal_all_mines(self) -> int:
        """
        Reveal every mine, leaving safe cells untouched.

        Returns:
            Number of mines that were newly revealed.
        """
        newly_revealed = 0
        for _, _, cell in self.iter_cells():
            if cell.is_mine and not cell.is_revealed:
                cell.is_revealed = True
                newly_revealed += 1
        return newly_revealed

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def has_mines(self) -> bool:
        """Whether mines have been placed."""
        return self._mine_count > 0

    def count_mines(self) -> int:
        """Count mine cells on the board."""
        return sum(1 for _, _, cell in self.iter_cells() if cell.is_mine)

    def count_flagged_cells(self) -> int:
        """Count flagged cells on the board."""
        return sum(1 for _, _, cell in self.iter_cells() if cell.is_flagged)

    def count_unrevealed_safe_cells(self) -> int:
        """Count safe cells still waiting to be revealed."""
        return sum(
            1 for _, _, cell in self.iter_cells()
            if not cell.is_mine and not cell.is_revealed
        )

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        self._check_position(row, col)
        return self._grid[row][col]

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, col, cell) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col, self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col, cell in self.iter_cells():
            obs[row, col] = cell.to_observation()
        return obs
