"""Observer hooks for the scoring scan.

The tracker reports every frame it scores and the resulting total to the
observers registered on it. Nothing is reported unless an observer is
attached, so scoring stays free of output by default.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .schemas import FrameOut

logger = logging.getLogger(__name__)


class ScoringObserver(Protocol):
    def frame_scored(self, frame: FrameOut) -> None: ...

    def game_scored(self, total: int) -> None: ...


class LoggingObserver:
    """Write scoring progress to a :mod:`logging` logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def frame_scored(self, frame: FrameOut) -> None:
        self.log.debug(
            "Frame %d (%s) rolls=%s points=%d cumulative=%d",
            frame.number,
            frame.kind,
            frame.rolls,
            frame.points,
            frame.cumulative,
        )

    def game_scored(self, total: int) -> None:
        self.log.info("Score: %d", total)
