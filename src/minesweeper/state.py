"""Game lifecycle states."""
from enum import Enum, auto


class GameState(Enum):
    """Possible states of the game. WON and LOST are terminal."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()
