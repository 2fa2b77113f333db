"""Events emitted by the game managers.

Managers never call each other. Mutating methods return a list of these
events and the coordinator applies the cross-manager consequences.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class TimerTicked:
    remaining: int


@dataclass(frozen=True)
class TimerExpired:
    pass


@dataclass(frozen=True)
class WordSkipped:
    word_id: str


@dataclass(frozen=True)
class WordTimeRecorded:
    word_id: str
    seconds: int
