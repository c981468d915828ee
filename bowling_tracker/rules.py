"""Ten-pin constants and the frame/roll cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

FRAMES_PER_GAME = 10
PINS_PER_FRAME = 10
ROLLS_PER_FRAME = 2
MAX_ROLLS_IN_FINAL_FRAME = 3


@dataclass(frozen=True)
class Active:
    """Cursor of a game in progress: the frame being bowled and its next roll."""

    frame: int = 1
    roll: int = 1

    @property
    def in_final_frame(self) -> bool:
        return self.frame == FRAMES_PER_GAME


@dataclass(frozen=True)
class Finished:
    frame: int = 0
    roll: int = 0


FINISHED = Finished()

Cursor = Union[Active, Finished]
