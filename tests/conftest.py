"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    BEGINNER,
    Board,
    Cell,
    Difficulty,
    GameSession,
    ManualScheduler,
)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board.create_empty(5, 5)


@pytest.fixture
def corner_mine_board() -> Board:
    """5x5 board with a single mine in the bottom-right corner."""
    return Board.from_mine_positions(5, 5, [(4, 4)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines splitting it in two."""
    return Board.from_mine_positions(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def three_mine_board() -> Board:
    """5x5 board where (1, 1) touches exactly three mines."""
    return Board.from_mine_positions(5, 5, [(0, 0), (0, 1), (1, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_count=3)
    cell.reveal()
    return cell


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def scheduler() -> ManualScheduler:
    """Scheduler whose clock is advanced by the test."""
    return ManualScheduler()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible mine layouts."""
    return random.Random(1234)


@pytest.fixture
def beginner_session(scheduler: ManualScheduler, rng: random.Random) -> GameSession:
    """Fresh beginner session (9x9, 10 mines)."""
    return GameSession.initialize(BEGINNER, scheduler=scheduler, rng=rng)


@pytest.fixture
def tiny_session(scheduler: ManualScheduler, rng: random.Random) -> GameSession:
    """3x3 session with a single mine."""
    return GameSession.initialize(
        Difficulty(3, 3, 1, "Tiny"), scheduler=scheduler, rng=rng
    )
