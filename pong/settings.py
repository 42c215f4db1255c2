"""Game-wide constants, state enumerations and the score record."""

from dataclasses import dataclass
from enum import Enum, auto

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
HALF_SCREEN_WIDTH = SCREEN_WIDTH // 2
HALF_SCREEN_HEIGHT = SCREEN_HEIGHT // 2
POINTS_TO_WIN = 10


class GameState(Enum):
    """The phase the game is currently in."""

    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()
    FIRST_SERVICE = auto()


class PlayerTurn(Enum):
    """Whose side the ball is travelling towards."""

    USER = auto()
    COMPUTER = auto()


@dataclass
class Score:
    """Points collected by the player and the enemy."""

    player: int = 0
    enemy: int = 0