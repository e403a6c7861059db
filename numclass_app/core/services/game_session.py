"""State machine and assignment engine for one classification play-through."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import partial
import logging
import random
from typing import Callable

from numclass_app.constants.game_constants import POINTS_PER_CORRECT, QUESTIONS_PER_GAME
from numclass_app.core.models import (
    Category,
    ClassificationResults,
    GamePhase,
    LeaderboardEntry,
    Question,
)
from numclass_app.core.services.classification_board import ClassificationBoard
from numclass_app.core.services.leaderboard import LeaderboardStore
from numclass_app.core.services.question_bank import CategoryRegistry, QuestionBank
from numclass_app.core.services.ticker import Ticker

logger = logging.getLogger(__name__)

_TRANSITIONS: dict[GamePhase, frozenset[GamePhase]] = {
    GamePhase.START: frozenset({GamePhase.INSTRUCTIONS, GamePhase.PLAYING}),
    GamePhase.INSTRUCTIONS: frozenset({GamePhase.START, GamePhase.PLAYING}),
    GamePhase.PLAYING: frozenset({GamePhase.RESULTS}),
    GamePhase.RESULTS: frozenset({GamePhase.GAME_OVER}),
    GamePhase.GAME_OVER: frozenset({GamePhase.START}),
}

_LEADERBOARD_PHASES = frozenset({GamePhase.START, GamePhase.GAME_OVER})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_elapsed(seconds: int) -> str:
    """Render a second count as ``m:ss``."""
    minutes, remaining = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{remaining:02d}"


class ClassificationSession:
    """Owns one player's game: phase, drawn questions, board, timer and score.

    Every intent returns ``True`` when it changed something and ``False``
    when it was rejected; rejected intents leave the state untouched.
    """

    def __init__(
        self,
        question_bank: QuestionBank,
        category_registry: CategoryRegistry,
        leaderboard_store: LeaderboardStore,
        ticker: Ticker,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        questions_per_game: int = QUESTIONS_PER_GAME,
        points_per_correct: int = POINTS_PER_CORRECT,
    ) -> None:
        self._bank = question_bank
        self._registry = category_registry
        self._leaderboard_store = leaderboard_store
        self._ticker = ticker
        self._rng = rng or random.Random()
        self._clock = clock or _utc_now
        self._questions_per_game = questions_per_game
        self._points_per_correct = points_per_correct

        self._phase = GamePhase.START
        self._player_name = ""
        self._selected_questions: list[Question] = []
        self._board: ClassificationBoard | None = None
        self._selected_number: str | None = None
        self._elapsed_seconds = 0
        self._results: ClassificationResults | None = None
        self._score = 0
        self._tick_generation = 0
        self._leaderboard_open = False
        self._leaderboard: list[LeaderboardEntry] = self._leaderboard_store.load()

    # --- Read accessors ---

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def player_name(self) -> str:
        return self._player_name

    @property
    def selected_questions(self) -> list[Question]:
        return list(self._selected_questions)

    @property
    def pool(self) -> list[str]:
        return self._board.pool() if self._board else []

    @property
    def assignments(self) -> dict[str, list[str]]:
        return self._board.assignments() if self._board else {}

    def bucket(self, category_id: str) -> list[str]:
        if self._board is None or not self._registry.has_category(category_id):
            return []
        return self._board.bucket(category_id)

    @property
    def selected_number(self) -> str | None:
        return self._selected_number

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def results(self) -> ClassificationResults | None:
        return self._results

    @property
    def score(self) -> int:
        return self._score

    @property
    def leaderboard(self) -> list[LeaderboardEntry]:
        return list(self._leaderboard)

    @property
    def leaderboard_open(self) -> bool:
        return self._leaderboard_open

    @property
    def classified_count(self) -> int:
        return self._board.assigned_count() if self._board else 0

    @property
    def categories(self) -> list[Category]:
        return self._registry.get_categories()

    # --- Phase intents ---

    def set_player_name(self, name: str) -> bool:
        if self._phase is not GamePhase.START:
            return self._reject("set_player_name")
        self._player_name = name
        return True

    def go_to_instructions(self) -> bool:
        if not self._has_player_name():
            return self._reject("go_to_instructions")
        return self._transition(GamePhase.INSTRUCTIONS)

    def dismiss_instructions(self) -> bool:
        if self._phase is not GamePhase.INSTRUCTIONS:
            return self._reject("dismiss_instructions")
        return self._transition(GamePhase.START)

    def start_game(self) -> bool:
        if not self._has_player_name():
            return self._reject("start_game")
        if not self._transition(GamePhase.PLAYING):
            return False
        self._selected_questions = self._bank.draw(self._questions_per_game, self._rng)
        self._board = ClassificationBoard(
            [question.number for question in self._selected_questions],
            self._registry.ids(),
        )
        self._selected_number = None
        self._elapsed_seconds = 0
        self._results = None
        self._score = 0
        self._leaderboard_open = False
        self._tick_generation += 1
        self._ticker.start(partial(self._handle_tick, self._tick_generation))
        logger.info(
            "Started game for %s with %d numbers",
            self._player_name.strip(),
            len(self._selected_questions),
        )
        return True

    def submit(self) -> bool:
        if self._phase is not GamePhase.PLAYING:
            return self._reject("submit")
        self._stop_ticking()
        self._results = self._compute_results()
        self._selected_number = None
        self._transition(GamePhase.RESULTS)
        logger.info(
            "Submitted: %d correct, %d wrong, %d unplaced after %s",
            self._results.correct,
            self._results.wrong,
            len(self.pool),
            format_elapsed(self._elapsed_seconds),
        )
        return True

    def continue_after_results(self) -> bool:
        if self._phase is not GamePhase.RESULTS or self._results is None:
            return self._reject("continue_after_results")
        self._score = self._results.correct * self._points_per_correct
        self._transition(GamePhase.GAME_OVER)
        if self._score > 0:
            entry = LeaderboardEntry(
                name=self._player_name.strip(),
                score=self._score,
                date=self._clock().isoformat(),
            )
            self._leaderboard_store.save(entry)
            self._leaderboard = self._leaderboard_store.load()
        return True

    def return_to_start(self) -> bool:
        if self._phase is not GamePhase.GAME_OVER:
            return self._reject("return_to_start")
        self._transition(GamePhase.START)
        self._selected_questions = []
        self._board = None
        self._selected_number = None
        self._elapsed_seconds = 0
        self._results = None
        self._score = 0
        return True

    def open_leaderboard(self) -> bool:
        if self._phase not in _LEADERBOARD_PHASES:
            return self._reject("open_leaderboard")
        self._leaderboard = self._leaderboard_store.load()
        self._leaderboard_open = True
        return True

    def close_leaderboard(self) -> bool:
        if not self._leaderboard_open:
            return self._reject("close_leaderboard")
        self._leaderboard_open = False
        return True

    # --- Assignment intents ---

    def select_number(self, identifier: str) -> bool:
        if self._phase is not GamePhase.PLAYING or self._board is None:
            return self._reject("select_number")
        if not self._board.contains(identifier):
            return self._reject("select_number")
        self._selected_number = identifier
        return True

    def place_in_category(self, category_id: str) -> bool:
        if self._phase is not GamePhase.PLAYING or self._board is None:
            return self._reject("place_in_category")
        if self._selected_number is None or not self._registry.has_category(category_id):
            return self._reject("place_in_category")
        self._board.place(self._selected_number, category_id)
        self._selected_number = None
        return True

    def remove_from_category(self, identifier: str, category_id: str) -> bool:
        if self._phase is not GamePhase.PLAYING or self._board is None:
            return self._reject("remove_from_category")
        if not self._registry.has_category(category_id):
            return self._reject("remove_from_category")
        if not self._board.unassign(identifier, category_id):
            return self._reject("remove_from_category")
        if self._selected_number == identifier:
            self._selected_number = None
        return True

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    # --- Timer ---

    def tick(self) -> bool:
        if self._phase is not GamePhase.PLAYING:
            return False
        self._elapsed_seconds += 1
        return True

    def shutdown(self) -> None:
        """Stop background ticking; used when the owning shell tears down."""
        self._stop_ticking()

    def _handle_tick(self, generation: int) -> None:
        if generation != self._tick_generation:
            return
        self.tick()

    def _stop_ticking(self) -> None:
        self._tick_generation += 1
        self._ticker.stop()

    # --- Helpers ---

    def _compute_results(self) -> ClassificationResults:
        answer_key = {q.number: q.correct_category for q in self._selected_questions}
        correct = 0
        wrong = 0
        for category_id, numbers in self.assignments.items():
            for number in numbers:
                if answer_key.get(number) == category_id:
                    correct += 1
                else:
                    wrong += 1
        return ClassificationResults(correct=correct, wrong=wrong, total=correct + wrong)

    def _has_player_name(self) -> bool:
        return bool(self._player_name.strip())

    def _transition(self, target: GamePhase) -> bool:
        if target not in _TRANSITIONS[self._phase]:
            return self._reject(f"transition to {target.name}")
        logger.info("Phase %s -> %s", self._phase.name, target.name)
        self._phase = target
        return True

    def _reject(self, intent: str) -> bool:
        logger.debug("Ignored %s in phase %s", intent, self._phase.name)
        return False
