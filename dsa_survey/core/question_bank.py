"""
Question bank for award categories.

The bank is read once at startup from a JSON object mapping each category
name to its ordered list of questions. Answers are keyed by question text,
so the order is only meaningful for presentation and document generation.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from loguru import logger

from dsa_survey.core.errors import NotFoundError, QuestionBankError


class QuestionBank:
    """Immutable mapping of category -> ordered questions."""

    def __init__(self, categories: Mapping[str, list[str]]):
        self._categories = MappingProxyType(
            {name: tuple(questions) for name, questions in categories.items()}
        )

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def list_categories(self) -> list[str]:
        return list(self._categories)

    def get_questions(self, category: str) -> list[str]:
        """Return the questions for a category, raising NotFoundError if unknown."""
        if category not in self._categories:
            raise NotFoundError("Category not found")
        return list(self._categories[category])

    def has_category(self, category: str) -> bool:
        return category in self._categories

    def has_question(self, category: str, question: str) -> bool:
        return question in self._categories.get(category, ())

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(questions) for name, questions in self._categories.items()}


def _validate(data: object, source: Path) -> dict[str, list[str]]:
    if not isinstance(data, dict):
        raise QuestionBankError(f"{source}: expected a JSON object of categories")
    if not data:
        raise QuestionBankError(f"{source}: no categories defined")

    for category, questions in data.items():
        if not category.strip():
            raise QuestionBankError(f"{source}: empty category name")
        if not isinstance(questions, list) or not all(isinstance(q, str) for q in questions):
            raise QuestionBankError(
                f"{source}: category '{category}' must map to a list of strings"
            )
    return data


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict:
    data: dict = {}
    for key, value in pairs:
        if key in data:
            raise QuestionBankError(f"Duplicate category in question source: {key}")
        data[key] = value
    return data


def load_question_bank(path: Path | str) -> QuestionBank:
    """
    Load the question bank from a JSON file.

    Raises:
        QuestionBankError: If the file is missing, unreadable, malformed, or
            defines the same category twice.
    """
    source = Path(path)
    try:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f, object_pairs_hook=_reject_duplicate_keys)
    except FileNotFoundError as e:
        raise QuestionBankError(f"Question source not found: {source}") from e
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"{source}: invalid JSON ({e})") from e
    except OSError as e:
        raise QuestionBankError(f"{source}: {e}") from e

    bank = QuestionBank(_validate(data, source))
    logger.info(f"Loaded {len(bank)} categories from {source}")
    return bank
