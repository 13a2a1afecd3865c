"""
Game session for Minesweeper.

Owns the game lifecycle around a board: lazy mine placement on the first
reveal, win/lose transitions, the game clock and the mine counter.
"""
import logging
import random
from typing import Optional

from .board import Board
from .difficulty import BEGINNER, Difficulty
from .snapshot import SessionSnapshot
from .state import GameState
from .timer import ManualScheduler, Scheduler, TickHandle


logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 1.0


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Single-player game session.

    Every mutation goes through this class and is ignored once the game
    has ended. Operations return an immutable ``SessionSnapshot``.

    The clock starts on the first reveal and is stopped exactly once, on
    win, loss or reset. Ticks come from the injected scheduler; with the
    default ``ManualScheduler`` the host advances time itself.
    """

    def __init__(
        self,
        difficulty: Difficulty = BEGINNER,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        """
        Initialize a session.

        Args:
            difficulty: Board geometry and mine count.
            scheduler: Source of clock ticks (default: ManualScheduler).
            rng: Random source for mine placement.
            tick_interval: Seconds between clock ticks.
        """
        if tick_interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {tick_interval}")
        self.scheduler = scheduler or ManualScheduler()
        self.rng = rng
        self.tick_interval = tick_interval
        self._tick_handle: Optional[TickHandle] = None
        self._init_state(difficulty)

    @classmethod
    def initialize(
        cls,
        difficulty: Difficulty = BEGINNER,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """Create a fresh session for a difficulty."""
        return cls(difficulty, scheduler=scheduler, rng=rng)

    def _init_state(self, difficulty: Difficulty) -> None:
        self._difficulty = difficulty
        self._board = Board.create_empty(difficulty.rows, difficulty.cols)
        self._state = GameState.PLAYING
        self._elapsed_seconds = 0
        self._has_first_click_occurred = False
        logger.info(
            "New %s game: %dx%d with %d mines",
            difficulty.label, difficulty.rows, difficulty.cols, difficulty.mines,
        )

    # ========================================================================
    # Clock
    # ========================================================================

    def _start_timer(self) -> None:
        self._stop_timer()
        handle = None

        def tick() -> None:
            if handle is not self._tick_handle or self._state != GameState.PLAYING:
                return
            self._elapsed_seconds += 1

        handle = self.scheduler.schedule_repeating(self.tick_interval, tick)
        self._tick_handle = handle
        logger.debug("Game clock started")

    def _stop_timer(self) -> None:
        if self._tick_handle is None:
            return
        self._tick_handle.cancel()
        self._tick_handle = None
        logger.debug("Game clock stopped at %ds", self._elapsed_seconds)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def apply_reveal(self, row: int, col: int) -> SessionSnapshot:
        """
        Reveal a cell.

        The first reveal places mines around the clicked cell and starts
        the clock. Revealing a mine loses the game and exposes every mine;
        revealing the last safe cell wins it.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Snapshot after the move.
        """
        if self._state != GameState.PLAYING:
            return self.snapshot()

        if not self._has_first_click_occurred:
            self._board.place_mines(self._difficulty.mines, row, col, rng=self.rng)
            self._has_first_click_occurred = True
            self._start_timer()

        cell = self._board.get_cell(row, col)
        if cell.is_flagged or cell.is_revealed:
            return self.snapshot()

        self._board.reveal(row, col)

        if cell.is_mine:
            self._state = GameState.LOST
            self._board.reveal_all_mines()
            self._stop_timer()
            logger.info("Game lost at (%d, %d) after %ds", row, col, self._elapsed_seconds)
        elif self._board.count_unrevealed_safe_cells() == 0:
            self._state = GameState.WON
            self._stop_timer()
            logger.info("Game won in %ds", self._elapsed_seconds)

        return self.snapshot()

    def apply_toggle_flag(self, row: int, col: int) -> SessionSnapshot:
        """Toggle the flag on a cell while the game is in progress."""
        if self._state == GameState.PLAYING:
            self._board.toggle_flag(row, col)
        return self.snapshot()

    def reset(self, difficulty: Optional[Difficulty] = None) -> SessionSnapshot:
        """
        Start over, optionally with a new difficulty.

        The running clock is always stopped before the new game begins.
        """
        self._stop_timer()
        self._init_state(difficulty or self._difficulty)
        return self.snapshot()

    # ========================================================================
    # State Accessors
    # ========================================================================

    def mine_counter_display(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self._difficulty.mines - self._board.count_flagged_cells()

    def snapshot(self) -> SessionSnapshot:
        """Read-only view of the current session."""
        return SessionSnapshot.capture(
            self._board,
            state=self._state,
            elapsed_seconds=self._elapsed_seconds,
            mines_remaining=self.mine_counter_display(),
            has_first_click_occurred=self._has_first_click_occurred,
            difficulty=self._difficulty,
        )

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def mine_count(self) -> int:
        return self._difficulty.mines

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def board(self) -> Board:
        return self._board

    @property
    def has_first_click_occurred(self) -> bool:
        return self._has_first_click_occurred

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    @property
    def is_timer_running(self) -> bool:
        """Whether the game clock currently holds a live tick."""
        return self._tick_handle is not None and not self._tick_handle.cancelled
