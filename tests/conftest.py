import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bowling_tracker import config


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test with strict pins and scoring logs off, whatever the env says."""
    monkeypatch.setattr(config, "STRICT_PINS", False)
    monkeypatch.setattr(config, "LOG_SCORING", False)
    yield
