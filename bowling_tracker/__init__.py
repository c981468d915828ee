"""Roll tracking and scoring for a single player's ten-pin bowling game."""

from .exceptions import BowlingError, ErrorDetail, GameFinishedError, InvalidPinCount
from .rules import FRAMES_PER_GAME, PINS_PER_FRAME
from .telemetry import LoggingObserver, ScoringObserver
from .tracker import GameTracker

__all__ = [
    "GameTracker",
    "BowlingError",
    "ErrorDetail",
    "GameFinishedError",
    "InvalidPinCount",
    "LoggingObserver",
    "ScoringObserver",
    "FRAMES_PER_GAME",
    "PINS_PER_FRAME",
]
