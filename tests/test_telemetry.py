import logging
import os, sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from bowling_tracker import GameTracker, LoggingObserver, config


class RecordingObserver:
    def __init__(self):
        self.frames = []
        self.totals = []

    def frame_scored(self, frame):
        self.frames.append(frame)

    def game_scored(self, total):
        self.totals.append(total)


def test_observer_sees_each_frame_and_total():
    observer = RecordingObserver()
    game = GameTracker(observers=[observer])
    for pins in [10, 5, 5, 3]:
        game.record_roll(pins)
    assert game.score() == 33
    assert [(f.number, f.kind, f.points) for f in observer.frames] == [
        (1, "strike", 20),
        (2, "spare", 13),
    ]
    assert observer.totals == [33]


def test_observer_added_later():
    observer = RecordingObserver()
    game = GameTracker()
    game.record_roll(4)
    game.add_observer(observer)
    assert game.score() == 0
    assert observer.frames == []
    assert observer.totals == [0]


def test_no_observers_by_default():
    game = GameTracker()
    game.record_roll(10)
    game.score()
    assert game._observers == []


def test_logging_observer(caplog):
    caplog.set_level(logging.DEBUG, logger="bowling_tracker")
    game = GameTracker(observers=[LoggingObserver()])
    for pins in [5, 5, 3, 0]:
        game.record_roll(pins)
    game.score()
    assert "Frame 1 (spare) rolls=[5, 5] points=13 cumulative=13" in caplog.text
    assert "Score: 16" in caplog.text


def test_logging_observer_enabled_from_config(monkeypatch, caplog):
    monkeypatch.setattr(config, "LOG_SCORING", True)
    caplog.set_level(logging.INFO, logger="bowling_tracker")
    game = GameTracker()
    for pins in [10] * 12:
        game.record_roll(pins)
    game.score()
    assert "Score: 300" in caplog.text


def test_recorded_rolls_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="bowling_tracker.tracker")
    game = GameTracker()
    game.record_roll(7)
    assert "Roll 1: 7 pins in frame 1 (roll 1)" in caplog.text
    for pins in [3] + [0] * 18:
        game.record_roll(pins)
    assert "Game over after 20 rolls" in caplog.text
