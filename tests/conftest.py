from datetime import datetime, timezone
import random

import pytest

from numclass_app.core.models import Category, Question
from numclass_app.core.services.game_session import ClassificationSession
from numclass_app.core.services.leaderboard import LeaderboardStore
from numclass_app.core.services.question_bank import CategoryRegistry, QuestionBank
from numclass_app.core.services.storage import InMemoryKeyValueStore
from numclass_app.data.categories import CATEGORIES
from numclass_app.data.questions import QUESTIONS

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


class ManualTicker:
    """Ticker fake that only fires when the test asks it to."""

    def __init__(self):
        self.callback = None
        self.start_count = 0
        self.stop_count = 0

    @property
    def is_running(self):
        return self.callback is not None

    def start(self, callback):
        self.callback = callback
        self.start_count += 1

    def stop(self):
        self.callback = None
        self.stop_count += 1

    def fire(self, times=1):
        for _ in range(times):
            if self.callback is not None:
                self.callback()


@pytest.fixture()
def registry():
    return CategoryRegistry(CATEGORIES)


@pytest.fixture()
def bank(registry):
    return QuestionBank(QUESTIONS, registry)


@pytest.fixture()
def small_bank(registry):
    return QuestionBank(
        [
            Question("2i", "imaginary"),
            Question("π", "irrational"),
            Question("-√36", "integer"),
        ],
        registry,
    )


@pytest.fixture()
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture()
def leaderboard_store(kv_store):
    return LeaderboardStore(kv_store)


@pytest.fixture()
def ticker():
    return ManualTicker()


def make_session(bank, registry, leaderboard_store, ticker, seed=7, **kwargs):
    return ClassificationSession(
        question_bank=bank,
        category_registry=registry,
        leaderboard_store=leaderboard_store,
        ticker=ticker,
        rng=random.Random(seed),
        clock=lambda: FIXED_NOW,
        **kwargs,
    )


@pytest.fixture()
def session(bank, registry, leaderboard_store, ticker):
    return make_session(bank, registry, leaderboard_store, ticker)


@pytest.fixture()
def small_session(small_bank, registry, leaderboard_store, ticker):
    return make_session(small_bank, registry, leaderboard_store, ticker)


@pytest.fixture()
def two_categories():
    return [
        Category(id="even", name="Even", description="Divisible by two"),
        Category(id="odd", name="Odd", description="Not divisible by two"),
    ]
