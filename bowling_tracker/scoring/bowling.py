"""Ten-pin bowling scoring engine built on :class:`GameTracker`."""
from typing import Dict

from ..schemas import RollEvent
from ..tracker import GameTracker


def init_state(config: Dict) -> Dict:
    return {
        "config": config,
        "game": GameTracker(strict=config.get("strict")),
    }


def apply(event: Dict, state: Dict) -> Dict:
    roll = RollEvent.model_validate(event)
    state["game"].record_roll(roll.pins)
    return state


def summary(state: Dict) -> Dict:
    return state["game"].snapshot().model_dump(by_alias=True)
