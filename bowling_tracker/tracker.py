"""Single-player ten-pin game tracker.

A :class:`GameTracker` records the pins knocked down on each roll of one
player's game and scores the roll log on demand. Frames 1-9 take at most two
rolls; frame 10 takes a third roll only after a strike or a spare.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from . import config
from .exceptions import GameFinishedError, InvalidPinCount
from .rules import (
    FINISHED,
    FRAMES_PER_GAME,
    MAX_ROLLS_IN_FINAL_FRAME,
    PINS_PER_FRAME,
    ROLLS_PER_FRAME,
    Active,
    Cursor,
    Finished,
)
from .schemas import FrameOut, GameSummary
from .telemetry import LoggingObserver, ScoringObserver

logger = logging.getLogger(__name__)


class GameTracker:
    def __init__(
        self,
        *,
        strict: Optional[bool] = None,
        observers: Optional[Iterable[ScoringObserver]] = None,
    ) -> None:
        self._rolls: List[int] = []
        self._cursor: Cursor = Active()
        self.strict = config.STRICT_PINS if strict is None else strict
        if observers is None:
            observers = [LoggingObserver()] if config.LOG_SCORING else []
        self._observers: List[ScoringObserver] = list(observers)

    def __repr__(self) -> str:
        return (
            f"GameTracker(frame={self.current_frame}, next_roll={self.next_roll}, "
            f"rolls={len(self._rolls)})"
        )

    def add_observer(self, observer: ScoringObserver) -> None:
        self._observers.append(observer)

    # -- state queries ---------------------------------------------------

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def current_frame(self) -> int:
        """Frame being bowled, 1..10, or 0 once the game is over."""
        return self._cursor.frame

    @property
    def next_roll(self) -> int:
        """Next roll within the current frame, 1..3, or 0 once the game is over."""
        return self._cursor.roll

    def is_over(self) -> bool:
        return isinstance(self._cursor, Finished)

    @property
    def pins_standing(self) -> int:
        """Pins available to the next roll, assuming plausible earlier rolls."""
        cursor = self._cursor
        if isinstance(cursor, Finished):
            return 0
        if cursor.roll == 1:
            return PINS_PER_FRAME
        previous = self._rolls[-1]
        if not cursor.in_final_frame:
            return PINS_PER_FRAME - previous
        if cursor.roll == 2:
            return PINS_PER_FRAME if previous == PINS_PER_FRAME else PINS_PER_FRAME - previous
        first, second = self._rolls[-2:]
        if first == PINS_PER_FRAME and second < PINS_PER_FRAME:
            return PINS_PER_FRAME - second
        return PINS_PER_FRAME

    def is_strike(self, index: int) -> bool:
        return self._rolls[index] == PINS_PER_FRAME

    def is_spare(self, index: int) -> bool:
        """``index`` and ``index + 1`` must both be recorded rolls."""
        return self._rolls[index] + self._rolls[index + 1] == PINS_PER_FRAME

    # -- recording -------------------------------------------------------

    def record_roll(self, pins: int) -> bool:
        """Record one roll.

        Returns ``True`` when the player rolls again in the same frame and
        ``False`` once the frame (or the game) is complete. Raises
        :class:`GameFinishedError` if the game is already over; the roll log
        is left untouched in that case.
        """

        cursor = self._cursor
        if isinstance(cursor, Finished):
            raise GameFinishedError(len(self._rolls))
        if self.strict:
            self._check_pins(pins)

        self._rolls.append(pins)
        if cursor.in_final_frame:
            continues = self._advance_final_frame(cursor, pins)
        else:
            continues = self._advance_frame(cursor, pins)

        logger.debug(
            "Roll %d: %d pins in frame %d (roll %d)",
            len(self._rolls),
            pins,
            cursor.frame,
            cursor.roll,
        )
        if self.is_over():
            logger.debug("Game over after %d rolls", len(self._rolls))
        return continues

    def _check_pins(self, pins: object) -> None:
        standing = self.pins_standing
        if isinstance(pins, bool) or not isinstance(pins, int):
            raise InvalidPinCount(pins, standing)
        if pins < 0 or pins > standing:
            raise InvalidPinCount(pins, standing)

    def _advance_frame(self, cursor: Active, pins: int) -> bool:
        if (cursor.roll == 1 and pins == PINS_PER_FRAME) or cursor.roll == ROLLS_PER_FRAME:
            self._cursor = Active(cursor.frame + 1, 1)
            return False
        self._cursor = Active(cursor.frame, cursor.roll + 1)
        return True

    def _advance_final_frame(self, cursor: Active, pins: int) -> bool:
        # Strike check must come before the spare check: a strike followed by
        # anything on roll 2 still earns roll 3.
        if cursor.roll == 1 and pins == PINS_PER_FRAME:
            self._cursor = Active(cursor.frame, 2)
            return True
        knocked = self._final_frame_pins(cursor.roll)
        if cursor.roll == 2 and knocked == PINS_PER_FRAME:
            self._cursor = Active(cursor.frame, 3)
            return True
        if cursor.roll == MAX_ROLLS_IN_FINAL_FRAME or (
            cursor.roll == 2 and knocked < PINS_PER_FRAME
        ):
            self._cursor = FINISHED
            return False
        self._cursor = Active(cursor.frame, cursor.roll + 1)
        return True

    def _final_frame_pins(self, roll: int) -> int:
        count = min(roll, len(self._rolls))
        return sum(self._rolls[-count:])

    # -- scoring ---------------------------------------------------------

    def _scan(self) -> Iterator[FrameOut]:
        rolls = self._rolls
        count = len(rolls)
        index = 0
        cumulative = 0
        for number in range(1, FRAMES_PER_GAME + 1):
            if index >= count:
                break
            if self.is_strike(index):
                kind, taken = "strike", 1
                points = PINS_PER_FRAME + sum(rolls[index + 1 : index + 3])
            elif index + 1 >= count:
                # Second roll of the frame not bowled yet.
                break
            elif self.is_spare(index):
                kind, taken = "spare", 2
                points = PINS_PER_FRAME + (rolls[index + 2] if index + 2 < count else 0)
            else:
                kind, taken = "open", 2
                points = rolls[index] + rolls[index + 1]

            if number == FRAMES_PER_GAME:
                frame_rolls = rolls[index:]
            else:
                frame_rolls = rolls[index : index + taken]
            cumulative += points
            yield FrameOut(
                number=number,
                rolls=frame_rolls,
                kind=kind,
                points=points,
                cumulative=cumulative,
            )
            index += taken

    def score(self) -> int:
        """Score of the rolls recorded so far; rolls not yet bowled count 0."""

        total = 0
        for frame in self._scan():
            total = frame.cumulative
            for observer in self._observers:
                observer.frame_scored(frame)
        for observer in self._observers:
            observer.game_scored(total)
        return total

    def frames(self) -> List[FrameOut]:
        return list(self._scan())

    def snapshot(self) -> GameSummary:
        frames = self.frames()
        return GameSummary(
            rolls=list(self._rolls),
            frames=frames,
            scores=[frame.points for frame in frames],
            total=frames[-1].cumulative if frames else 0,
            finished=self.is_over(),
            current_frame=self.current_frame,
            next_roll=self.next_roll,
        )
