import logging

import pytest

from numclass_app.core.bank_importer import (
    QuestionBankImportError,
    load_bank_or_default,
    load_question_bank_from_file,
    parse_question_bank_text,
)
from numclass_app.core.models import Question
from numclass_app.data.questions import QUESTIONS


def test_parse_skips_comments_and_blank_lines():
    text = "# Imaginary\n2i => imaginary\n\n   \nπ => Irrational\n"
    assert parse_question_bank_text(text) == [
        Question("2i", "imaginary"),
        Question("π", "irrational"),
    ]


def test_parse_splits_on_last_separator():
    assert parse_question_bank_text("a => b => natural") == [Question("a => b", "natural")]


def test_parse_reports_line_number():
    with pytest.raises(QuestionBankImportError, match="Line 2"):
        parse_question_bank_text("2i => imaginary\nnot a question\n")


def test_parse_rejects_empty_parts():
    with pytest.raises(QuestionBankImportError, match="number must not be empty"):
        parse_question_bank_text(" => natural")
    with pytest.raises(QuestionBankImportError, match="category must not be empty"):
        parse_question_bank_text("7 =>")


def test_load_from_file(tmp_path):
    path = tmp_path / "question_bank.txt"
    path.write_text("7 => natural\n-3 => integer\n", encoding="utf-8")
    imported = load_question_bank_from_file(path)
    assert imported.source_path == path
    assert imported.questions == [Question("7", "natural"), Question("-3", "integer")]


def test_load_rejects_file_without_questions(tmp_path):
    path = tmp_path / "question_bank.txt"
    path.write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(QuestionBankImportError):
        load_question_bank_from_file(path)


def test_load_bank_or_default_uses_file(tmp_path, registry):
    path = tmp_path / "question_bank.txt"
    path.write_text("7 => natural\n", encoding="utf-8")
    bank = load_bank_or_default(path, registry)
    assert bank.get_questions() == [Question("7", "natural")]


def test_load_bank_or_default_without_file(tmp_path, registry):
    bank = load_bank_or_default(tmp_path / "missing.txt", registry)
    assert bank.get_question_count() == len(QUESTIONS)


def test_load_bank_or_default_falls_back_on_unknown_category(tmp_path, registry, caplog):
    path = tmp_path / "question_bank.txt"
    path.write_text("7 => prime\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        bank = load_bank_or_default(path, registry)
    assert bank.get_question_count() == len(QUESTIONS)
    assert "Could not load question bank" in caplog.text
