"""Shared pytest fixtures for all tests."""

import random

import pytest

from rps_arena.records import PlayerRecord


class ScriptedRandom:
    """Random source that replays fixed answers.

    ``choice`` returns the next scripted move (which must be one of the
    offered options) and ``randrange`` returns the next scripted integer.
    """

    def __init__(self, choices=(), ranges=()):
        self._choices = list(choices)
        self._ranges = list(ranges)

    def choice(self, seq):
        item = self._choices.pop(0)
        assert item in seq
        return item

    def randrange(self, stop):
        value = self._ranges.pop(0)
        assert 0 <= value < stop
        return value

    @property
    def exhausted(self) -> bool:
        return not self._choices and not self._ranges


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def empty_record():
    return PlayerRecord()


def make_record(wins=(), losses=(), draws=0) -> PlayerRecord:
    """Build a record from win and loss moves (wins first, then losses)."""
    record = PlayerRecord()
    for move in wins:
        record.win(move)
    for move in losses:
        record.lose(move)
    for _ in range(draws):
        record.draw()
    return record


@pytest.fixture
def record_factory():
    return make_record
