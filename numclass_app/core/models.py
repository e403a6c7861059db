"""Domain models for the number classification game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GamePhase(Enum):
    """Top-level mode of a play-through."""

    START = "start"
    INSTRUCTIONS = "instructions"
    PLAYING = "playing"
    RESULTS = "results"
    GAME_OVER = "gameOver"


@dataclass(frozen=True, slots=True)
class Question:
    """A numeric expression and the category it belongs to."""

    number: str
    correct_category: str


@dataclass(frozen=True, slots=True)
class Category:
    """A classification bucket shown to the player."""

    id: str
    name: str
    description: str


@dataclass(frozen=True, slots=True)
class ClassificationResults:
    """Tally computed when the player submits."""

    correct: int
    wrong: int
    total: int


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    """Persisted high-score record; ``date`` is an ISO-8601 timestamp."""

    name: str
    score: int
    date: str
