import os

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name):
    """
    Read a boolean flag from the environment:
      - unset/empty means off
      - '1', 'true', 'yes', 'on' (any case, surrounding blanks ignored) mean on
    """
    val = (os.getenv(name) or "").strip().lower()
    return val in _TRUTHY

STRICT_PINS = _env_flag("BOWLING_STRICT_PINS")

LOG_SCORING = _env_flag("BOWLING_LOG_SCORING")
