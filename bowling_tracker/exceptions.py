from pydantic import BaseModel
from typing import Optional


class ErrorDetail(BaseModel):
    """Problem-detail style description of a bowling error."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    code: str


class BowlingError(Exception):
    """Base class for game-tracking errors."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(
            type=self.type, title=self.title, detail=self.detail, code=self.code
        )


class GameFinishedError(BowlingError):
    def __init__(self, rolls: int) -> None:
        super().__init__(
            title="Game finished",
            detail=f"game is over after {rolls} rolls; no more rolls can be recorded",
            code="game_finished",
        )
        self.rolls = rolls


class InvalidPinCount(BowlingError):
    def __init__(self, pins: object, standing: int) -> None:
        super().__init__(
            title="Invalid pin count",
            detail=f"pins must be an integer between 0 and {standing} (got {pins!r})",
            code="invalid_pins",
        )
        self.pins = pins
        self.standing = standing
