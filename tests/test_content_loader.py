"""Tests for loading categories from content files."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from quizdeck.content import CategoryRepository, load_categories
from quizdeck.data_models import FillBlankQuiz, FourQuickQuiz, TrueFalseQuiz

CONTENT = """
categories:
  - id: geography
    name: Geography
    quizzes:
      - type: FOUR_QUICK
        question: Which river flows through Budapest?
        options: [Rhine, Danube, Elbe, Vistula]
        answer: 1
      - type: TRUE_FALSE
        question: Canberra is the capital of Australia.
        answer: true
  - id: words
    name: Words
    quizzes:
      - type: FILL_BLANK
        question: Opposite of cold?
        answer: hot
"""


@pytest.fixture
def temp_content_dir():
    """Create a temporary directory for content files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def _write(directory: Path, text: str) -> Path:
    path = directory / "categories.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_categories_builds_typed_quizzes(temp_content_dir):
    categories = load_categories(_write(temp_content_dir, CONTENT))

    assert [category.id for category in categories] == ["geography", "words"]
    geography = categories[0]
    assert isinstance(geography.quizzes[0], FourQuickQuiz)
    assert isinstance(geography.quizzes[1], TrueFalseQuiz)
    assert isinstance(categories[1].quizzes[0], FillBlankQuiz)
    assert geography.score == 0
    assert all(not quiz.solved for quiz in geography.quizzes)


def test_invalid_quiz_raises_value_error(temp_content_dir):
    content = """
categories:
  - id: broken
    name: Broken
    quizzes:
      - type: SINGLE_SELECT
        question: Pick
        options: [a, b]
        answer: 5
"""
    with pytest.raises(ValueError, match="Invalid category"):
        load_categories(_write(temp_content_dir, content))


def test_missing_categories_list_raises_value_error(temp_content_dir):
    with pytest.raises(ValueError):
        load_categories(_write(temp_content_dir, "quizzes: []\n"))


def test_missing_file_raises(temp_content_dir):
    with pytest.raises(FileNotFoundError):
        load_categories(temp_content_dir / "absent.yaml")


def test_repository_lookup(temp_content_dir):
    repository = CategoryRepository.from_path(_write(temp_content_dir, CONTENT))

    assert repository.get("words").name == "Words"
    assert [category.id for category in repository.all()] == ["geography", "words"]
    with pytest.raises(KeyError):
        repository.get("history")


def test_repository_rejects_duplicate_ids(temp_content_dir):
    categories = load_categories(_write(temp_content_dir, CONTENT))

    with pytest.raises(ValueError):
        CategoryRepository([categories[0], categories[0]])


def test_bundled_content_file_loads():
    path = Path(__file__).resolve().parents[1] / "data" / "categories.yaml"

    categories = load_categories(path)

    assert {category.id for category in categories} == {"geography", "science"}
