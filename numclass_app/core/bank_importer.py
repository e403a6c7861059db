"""Utilities for importing a question bank from a human-friendly text file.

File format (one question per line):

    NUMBER => CATEGORY_ID

Example:

    # Complex numbers
    3 + 4i => complex
    -2 + 5i => complex
    π => irrational

Blank lines and lines starting with ``#`` are ignored. Category ids are
checked against the registry when the bank is built, not here, so the parser
stays independent from whichever categories are installed.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from numclass_app.core.models import Question
from numclass_app.core.services.question_bank import CategoryRegistry, QuestionBank
from numclass_app.data.questions import QUESTIONS

logger = logging.getLogger(__name__)


class QuestionBankImportError(Exception):
    """Raised when a question bank file cannot be parsed."""


@dataclass(slots=True)
class ImportedBank:
    """Container for the imported questions and where they came from."""

    source_path: Path
    questions: list[Question]


_SEPARATOR = "=>"
_COMMENT_PREFIX = "#"


def load_question_bank_from_file(file_path: Path) -> ImportedBank:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_question_bank_text(text)
    if not questions:
        raise QuestionBankImportError("Question bank file did not contain any questions.")
    return ImportedBank(source_path=file_path, questions=questions)


def parse_question_bank_text(text: str) -> list[Question]:
    questions: list[Question] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(_COMMENT_PREFIX):
            continue
        questions.append(_parse_line(line, line_number))
    return questions


def _parse_line(line: str, line_number: int) -> Question:
    if _SEPARATOR not in line:
        raise QuestionBankImportError(
            f"Line {line_number}: expected 'NUMBER {_SEPARATOR} CATEGORY', got '{line}'."
        )
    number, category = (part.strip() for part in line.rsplit(_SEPARATOR, 1))
    if not number:
        raise QuestionBankImportError(f"Line {line_number}: number must not be empty.")
    if not category:
        raise QuestionBankImportError(f"Line {line_number}: category must not be empty.")
    return Question(number=number, correct_category=category.lower())


def load_bank_or_default(file_path: Path, registry: CategoryRegistry) -> QuestionBank:
    """Build the bank from ``file_path`` when it exists, else the built-in one.

    A file that fails to parse or names unknown categories is logged and
    ignored; the built-in questions are used instead.
    """
    if file_path.exists():
        try:
            imported = load_question_bank_from_file(file_path)
            bank = QuestionBank(imported.questions, registry)
        except (OSError, QuestionBankImportError, ValueError):
            logger.exception("Could not load question bank from %s; using built-in questions", file_path)
        else:
            logger.info("Loaded %d questions from %s", bank.get_question_count(), file_path)
            return bank
    return QuestionBank(QUESTIONS, registry)
