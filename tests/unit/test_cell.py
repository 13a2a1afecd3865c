"""
Unit tests for Cell class.

Tests cell reveal/flag behavior, derived display state and observation
conversion.
"""
from minesweeper import Cell, CellState, FLAG_MARKER, MINE_MARKER


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_blank(self) -> None:
        """New cell should be safe, hidden, unflagged with no neighbors."""
        cell = Cell()
        assert cell.is_mine is False
        assert cell.is_revealed is False
        assert cell.is_flagged is False
        assert cell.neighbor_count == 0

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_cell_with_neighbor_count(self) -> None:
        """Can create a cell with a neighbor count."""
        cell = Cell(neighbor_count=5)
        assert cell.neighbor_count == 5


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed and change state."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True
        assert hidden_cell.state == CellState.REVEALED

    def test_reveal_twice_fails(self, hidden_cell: Cell) -> None:
        """Revealing twice should fail the second time."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_fails(self, hidden_cell: Cell) -> None:
        """Flagged cells cannot be revealed."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test flag toggling."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_flagged is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_restores_hidden(self, hidden_cell: Cell) -> None:
        """Toggling twice returns to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_flagged is False
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_fails(self, numbered_cell: Cell) -> None:
        """Revealed cells cannot be flagged."""
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_flagged is False

    def test_flag_does_not_reveal(self, mine_cell: Cell) -> None:
        """Flagging never reveals a cell."""
        mine_cell.toggle_flag()
        assert mine_cell.is_revealed is False


# ============================================================================
# Display Content Tests
# ============================================================================

class TestCellContent:
    """Test derived display text."""

    def test_hidden_cell_is_blank(self, hidden_cell: Cell) -> None:
        """Hidden cells show nothing."""
        assert hidden_cell.content == ""

    def test_flagged_cell_shows_flag(self, hidden_cell: Cell) -> None:
        """Flagged cells show the flag marker."""
        hidden_cell.toggle_flag()
        assert hidden_cell.content == FLAG_MARKER

    def test_revealed_mine_shows_mine(self, mine_cell: Cell) -> None:
        """Revealed mines show the mine marker."""
        mine_cell.reveal()
        assert mine_cell.content == MINE_MARKER

    def test_revealed_number(self, numbered_cell: Cell) -> None:
        """Revealed numbered cells show their count."""
        assert numbered_cell.content == "3"

    def test_revealed_zero_is_blank(self, hidden_cell: Cell) -> None:
        """Revealed zero cells show nothing."""
        hidden_cell.reveal()
        assert hidden_cell.content == ""

    def test_flag_wins_over_revealed_mine(self) -> None:
        """A flagged mine exposed at game end still shows its flag."""
        cell = Cell(is_mine=True, is_flagged=True, is_revealed=True)
        assert cell.content == FLAG_MARKER
        assert cell.state == CellState.FLAGGED


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test numeric observation conversion."""

    def test_hidden_observation(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_observation(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    def test_numbered_observation(self, numbered_cell: Cell) -> None:
        assert numbered_cell.to_observation() == 3

    def test_revealed_mine_observation(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
