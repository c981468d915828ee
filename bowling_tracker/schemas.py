from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from .rules import PINS_PER_FRAME

FrameKind = Literal["strike", "spare", "open"]


class RollEvent(BaseModel):
    type: Literal["ROLL"]
    pins: int = Field(..., ge=0, le=PINS_PER_FRAME)

    model_config = ConfigDict(extra="forbid", strict=True)


class FrameOut(BaseModel):
    number: int
    rolls: List[int]
    kind: FrameKind
    points: int
    cumulative: int


class GameSummary(BaseModel):
    rolls: List[int]
    frames: List[FrameOut]
    scores: List[int]
    total: int
    finished: bool
    current_frame: int = Field(..., alias="currentFrame")
    next_roll: int = Field(..., alias="nextRoll")

    model_config = ConfigDict(populate_by_name=True)
