"""
Minesweeper rules engine.

Provides board generation, flood-fill reveal, flagging, win/loss
detection and the game clock behind a single-player session.
"""
from .cell import Cell, CellState, FLAG_MARKER, MINE_MARKER
from .board import Board
from .difficulty import (
    Difficulty,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    get_difficulty,
)
from .state import GameState
from .session import GameSession
from .snapshot import CellView, SessionSnapshot
from .timer import (
    TickHandle,
    Scheduler,
    ManualScheduler,
    AsyncioScheduler,
)

__all__ = [
    "Cell",
    "CellState",
    "FLAG_MARKER",
    "MINE_MARKER",
    "Board",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "get_difficulty",
    "GameState",
    "GameSession",
    "CellView",
    "SessionSnapshot",
    "TickHandle",
    "Scheduler",
    "ManualScheduler",
    "AsyncioScheduler",
]
