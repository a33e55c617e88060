"""Tests for quiz content validation and per-type answer checks."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from quizdeck.data_models import (
    AlphaPickerQuiz,
    FillBlankQuiz,
    FillTwoBlanksQuiz,
    FourQuickQuiz,
    MultiSelectQuiz,
    PickerQuiz,
    QuizType,
    SingleSelectQuiz,
    TrueFalseQuiz,
    parse_quiz,
)


def test_parse_quiz_selects_model_by_type():
    quiz = parse_quiz(
        {
            "type": "MULTI_SELECT",
            "question": "Which are prime?",
            "options": ["2", "4", "5"],
            "answer": [0, 2],
        }
    )

    assert isinstance(quiz, MultiSelectQuiz)
    assert quiz.type is QuizType.MULTI_SELECT
    assert quiz.solved is False


def test_parse_quiz_rejects_unknown_type():
    with pytest.raises(ValidationError):
        parse_quiz({"type": "DRAG_AND_DROP", "question": "?", "answer": 1})


def test_type_tag_is_immutable():
    quiz = TrueFalseQuiz(question="Ice floats.", answer=True)

    with pytest.raises(ValidationError):
        quiz.type = QuizType.PICKER


def test_mark_solved_is_idempotent():
    quiz = TrueFalseQuiz(question="Ice floats.", answer=True)

    quiz.mark_solved()
    quiz.mark_solved()

    assert quiz.solved is True


def test_select_answer_must_reference_an_option():
    with pytest.raises(ValidationError):
        SingleSelectQuiz(question="Pick", options=["a", "b"], answer=2)


def test_four_quick_requires_four_options():
    with pytest.raises(ValidationError):
        FourQuickQuiz(question="Pick", options=["a", "b", "c"], answer=0)


def test_multi_select_compares_as_a_set():
    quiz = MultiSelectQuiz(question="Pick", options=["a", "b", "c"], answer=[2, 0])

    assert quiz.is_answer_correct([0, 2]) is True
    assert quiz.is_answer_correct({0}) is False
    assert quiz.is_answer_correct([0, 1, 2]) is False
    assert quiz.is_answer_correct(None) is False


def test_fill_blank_ignores_case_and_spacing():
    quiz = FillBlankQuiz(question="Largest ocean?", answer="Pacific Ocean")

    assert quiz.is_answer_correct("  pacific   ocean ") is True
    assert quiz.is_answer_correct("Atlantic") is False
    assert quiz.is_answer_correct(None) is False


def test_fill_two_blanks_checks_both_positions():
    quiz = FillTwoBlanksQuiz(question="Water?", answer=["Hydrogen", "Oxygen"])

    assert quiz.is_answer_correct(["hydrogen", "OXYGEN"]) is True
    assert quiz.is_answer_correct(["oxygen", "hydrogen"]) is False
    assert quiz.is_answer_correct(["hydrogen"]) is False


def test_picker_answer_must_be_in_range():
    with pytest.raises(ValidationError):
        PickerQuiz(question="Bones?", minimum=0, maximum=100, answer=206)
    with pytest.raises(ValidationError):
        PickerQuiz(question="Bones?", minimum=10, maximum=10, answer=10)


def test_picker_answer_must_sit_on_the_step_grid():
    with pytest.raises(ValidationError):
        PickerQuiz(question="Pick", minimum=0, maximum=10, step=5, answer=7)

    quiz = PickerQuiz(question="Pick", minimum=3, maximum=23, step=5, answer=13)
    assert quiz.answer == 13


def test_alpha_picker_normalizes_letter():
    quiz = AlphaPickerQuiz(question="Symbol for potassium?", answer=" k ")

    assert quiz.answer == "K"
    assert quiz.is_answer_correct("k") is True
    assert quiz.is_answer_correct("N") is False


def test_alpha_picker_rejects_non_letters():
    with pytest.raises(ValidationError):
        AlphaPickerQuiz(question="?", answer="KR")
