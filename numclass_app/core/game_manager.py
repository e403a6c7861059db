"""Thread-safe facade over the classification session shared by UI and API."""

from __future__ import annotations

from dataclasses import dataclass, field
import random
from threading import RLock
from typing import Callable

from numclass_app.core.models import (
    Category,
    ClassificationResults,
    GamePhase,
    LeaderboardEntry,
)
from numclass_app.core.services.game_session import ClassificationSession, format_elapsed
from numclass_app.core.services.leaderboard import LeaderboardStore
from numclass_app.core.services.question_bank import CategoryRegistry, QuestionBank
from numclass_app.core.services.ticker import ThreadTicker, Ticker
from numclass_app.data.categories import CATEGORIES
from numclass_app.data.questions import QUESTIONS


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable view of the session handed to renderers."""

    phase: GamePhase
    player_name: str
    elapsed_seconds: int
    score: int
    pool: list[str]
    assignments: dict[str, list[str]]
    selected_number: str | None
    results: ClassificationResults | None
    leaderboard: list[LeaderboardEntry]
    leaderboard_open: bool
    classified_count: int
    question_count: int
    categories: list[Category] = field(default_factory=list)

    @property
    def elapsed_display(self) -> str:
        return format_elapsed(self.elapsed_seconds)


class _SerializedTicker:
    """Runs tick callbacks under the manager lock."""

    def __init__(self, ticker: Ticker, lock: RLock) -> None:
        self._ticker = ticker
        self._lock = lock

    @property
    def is_running(self) -> bool:
        return self._ticker.is_running

    def start(self, callback: Callable[[], None]) -> None:
        def locked_callback() -> None:
            with self._lock:
                callback()

        self._ticker.start(locked_callback)

    def stop(self) -> None:
        self._ticker.stop()


class GameManager:
    """Facade exposing the presentation boundary with one lock around it."""

    def __init__(self, session: ClassificationSession, lock: RLock | None = None) -> None:
        self._session = session
        self._lock = lock or RLock()

    # --- Read accessors ---

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            session = self._session
            categories = session.categories
            return SessionSnapshot(
                phase=session.phase,
                player_name=session.player_name,
                elapsed_seconds=session.elapsed_seconds,
                score=session.score,
                pool=session.pool,
                assignments={c.id: session.bucket(c.id) for c in categories},
                selected_number=session.selected_number,
                results=session.results,
                leaderboard=session.leaderboard,
                leaderboard_open=session.leaderboard_open,
                classified_count=session.classified_count,
                question_count=len(session.selected_questions),
                categories=categories,
            )

    def get_phase(self) -> GamePhase:
        with self._lock:
            return self._session.phase

    def get_categories(self) -> list[Category]:
        with self._lock:
            return self._session.categories

    def get_leaderboard(self) -> list[LeaderboardEntry]:
        with self._lock:
            return self._session.leaderboard

    # --- Intents ---

    def set_player_name(self, name: str) -> bool:
        with self._lock:
            return self._session.set_player_name(name)

    def go_to_instructions(self) -> bool:
        with self._lock:
            return self._session.go_to_instructions()

    def dismiss_instructions(self) -> bool:
        with self._lock:
            return self._session.dismiss_instructions()

    def start_game(self) -> bool:
        with self._lock:
            return self._session.start_game()

    def select_number(self, identifier: str) -> bool:
        with self._lock:
            return self._session.select_number(identifier)

    def place_in_category(self, category_id: str) -> bool:
        with self._lock:
            return self._session.place_in_category(category_id)

    def remove_from_category(self, identifier: str, category_id: str) -> bool:
        with self._lock:
            return self._session.remove_from_category(identifier, category_id)

    def submit(self) -> bool:
        with self._lock:
            return self._session.submit()

    def continue_after_results(self) -> bool:
        with self._lock:
            return self._session.continue_after_results()

    def return_to_start(self) -> bool:
        with self._lock:
            return self._session.return_to_start()

    def open_leaderboard(self) -> bool:
        with self._lock:
            return self._session.open_leaderboard()

    def close_leaderboard(self) -> bool:
        with self._lock:
            return self._session.close_leaderboard()

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._session.set_shuffle_seed(seed)

    def shutdown(self) -> None:
        with self._lock:
            self._session.shutdown()


def create_game_manager(
    leaderboard_store: LeaderboardStore,
    question_bank: QuestionBank | None = None,
    category_registry: CategoryRegistry | None = None,
    ticker: Ticker | None = None,
    seed: int | None = None,
) -> GameManager:
    """Wire a session with default content and a background ticker."""
    registry = category_registry or CategoryRegistry(CATEGORIES)
    bank = question_bank or QuestionBank(QUESTIONS, registry)
    lock = RLock()
    session = ClassificationSession(
        question_bank=bank,
        category_registry=registry,
        leaderboard_store=leaderboard_store,
        ticker=_SerializedTicker(ticker or ThreadTicker(), lock),
        rng=random.Random(seed),
    )
    return GameManager(session, lock=lock)
