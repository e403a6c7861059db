"""Services holding the static question bank and category registry."""

from __future__ import annotations

import random

from numclass_app.core.models import Category, Question


class CategoryRegistry:
    """Read-only, ordered collection of classification categories."""

    def __init__(self, categories: list[Category]) -> None:
        if not categories:
            raise ValueError("Category registry must contain at least one category.")
        self._categories: list[Category] = []
        self._by_id: dict[str, Category] = {}
        for category in categories:
            category_id = category.id.strip()
            if not category_id:
                raise ValueError("Category id must not be empty.")
            if category_id in self._by_id:
                raise ValueError(f"Duplicate category id '{category_id}'.")
            self._by_id[category_id] = category
            self._categories.append(category)

    def get_categories(self) -> list[Category]:
        """Return a copy of the categories in display order."""
        return list(self._categories)

    def get(self, category_id: str) -> Category:
        try:
            return self._by_id[category_id]
        except KeyError:
            raise KeyError(f"Unknown category '{category_id}'") from None

    def has_category(self, category_id: str) -> bool:
        return category_id in self._by_id

    def ids(self) -> list[str]:
        return [category.id for category in self._categories]


class QuestionBank:
    """Validated pool of questions that games draw from."""

    def __init__(self, questions: list[Question], registry: CategoryRegistry) -> None:
        if not questions:
            raise ValueError("Question bank must contain at least one question.")
        self._questions = [self._prepare_question(q, registry) for q in questions]
        numbers = [q.number for q in self._questions]
        duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate numbers in question bank: {', '.join(duplicates)}")
        self._by_number = {q.number: q for q in self._questions}

    def get_questions(self) -> list[Question]:
        """Return a copy of all questions in bank order."""
        return list(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def find(self, number: str) -> Question | None:
        return self._by_number.get(number)

    def draw(self, count: int, rng: random.Random) -> list[Question]:
        """Return ``count`` distinct questions using an unbiased permutation.

        Fisher-Yates over a copy of the bank: walk from the last index down to
        1 and swap each slot with a uniformly chosen index in ``[0, i]``. When
        the bank is smaller than ``count`` the whole bank comes back shuffled.
        """
        if count < 0:
            raise ValueError("Question count must not be negative.")
        shuffled = list(self._questions)
        for i in range(len(shuffled) - 1, 0, -1):
            j = rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled[:count]

    @staticmethod
    def _prepare_question(question: Question, registry: CategoryRegistry) -> Question:
        number = question.number.strip()
        if not number:
            raise ValueError("Question number must not be empty.")
        category_id = question.correct_category.strip()
        if not registry.has_category(category_id):
            raise ValueError(f"Question '{number}' uses unknown category '{category_id}'.")
        return Question(number=number, correct_category=category_id)
