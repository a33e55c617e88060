from __future__ import annotations

import string
from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator


class QuizType(str, Enum):
    """Closed set of question kinds; each one has exactly one view implementation."""

    TRUE_FALSE = "TRUE_FALSE"
    SINGLE_SELECT = "SINGLE_SELECT"
    FOUR_QUICK = "FOUR_QUICK"
    MULTI_SELECT = "MULTI_SELECT"
    FILL_BLANK = "FILL_BLANK"
    FILL_TWO_BLANKS = "FILL_TWO_BLANKS"
    PICKER = "PICKER"
    ALPHA_PICKER = "ALPHA_PICKER"


def normalize_text(value: Optional[str]) -> str:
    """Collapse whitespace and case-fold free text so typed answers compare loosely."""
    if value is None:
        return ""
    return " ".join(value.split()).casefold()


class Quiz(BaseModel, ABC):
    """
    Single question owned by a category.

    The `type` tag never changes after construction. `solved` starts out false and
    is flipped once, by the view that submits an answer for this quiz.
    """

    question: str
    type: QuizType = Field(frozen=True)
    solved: bool = False

    @abstractmethod
    def is_answer_correct(self, answer: Any) -> bool:
        """Compare a candidate answer held by a view with the expected answer."""

    def mark_solved(self) -> None:
        self.solved = True


class TrueFalseQuiz(Quiz):
    type: Literal[QuizType.TRUE_FALSE] = Field(QuizType.TRUE_FALSE, frozen=True)
    answer: bool

    def is_answer_correct(self, answer: Optional[bool]) -> bool:
        return answer is not None and answer == self.answer


class _OptionsQuiz(Quiz):
    options: List[str] = Field(min_length=2)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.options):
            raise ValueError(
                f"answer index {index} is outside the {len(self.options)} available options"
            )


class SingleSelectQuiz(_OptionsQuiz):
    """Pick exactly one option out of a list."""

    type: Literal[QuizType.SINGLE_SELECT] = Field(QuizType.SINGLE_SELECT, frozen=True)
    answer: int

    @model_validator(mode="after")
    def validate_answer(self) -> "SingleSelectQuiz":
        self._check_index(self.answer)
        return self

    def is_answer_correct(self, answer: Optional[int]) -> bool:
        return answer is not None and answer == self.answer


class FourQuickQuiz(SingleSelectQuiz):
    """Single selection laid out as a grid of exactly four options."""

    type: Literal[QuizType.FOUR_QUICK] = Field(QuizType.FOUR_QUICK, frozen=True)

    @field_validator("options")
    @classmethod
    def validate_options(cls, value: List[str]) -> List[str]:
        if len(value) != 4:
            raise ValueError("options must contain exactly four entries")
        return value


class MultiSelectQuiz(_OptionsQuiz):
    """Select every correct option; the selection must match the answer set exactly."""

    type: Literal[QuizType.MULTI_SELECT] = Field(QuizType.MULTI_SELECT, frozen=True)
    answer: List[int] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_answer(self) -> "MultiSelectQuiz":
        for index in self.answer:
            self._check_index(index)
        return self

    def is_answer_correct(self, answer: Optional[Iterable[int]]) -> bool:
        if answer is None:
            return False
        return set(answer) == set(self.answer)


class FillBlankQuiz(Quiz):
    """Free text answer, optionally shown between a leading and a trailing fragment."""

    type: Literal[QuizType.FILL_BLANK] = Field(QuizType.FILL_BLANK, frozen=True)
    answer: str = Field(min_length=1)
    start: Optional[str] = None
    end: Optional[str] = None

    def is_answer_correct(self, answer: Optional[str]) -> bool:
        return normalize_text(answer) == normalize_text(self.answer)


class FillTwoBlanksQuiz(Quiz):
    type: Literal[QuizType.FILL_TWO_BLANKS] = Field(QuizType.FILL_TWO_BLANKS, frozen=True)
    answer: List[str] = Field(min_length=2, max_length=2)

    def is_answer_correct(self, answer: Optional[Sequence[Optional[str]]]) -> bool:
        if answer is None or len(answer) != 2:
            return False
        return all(
            normalize_text(given) == normalize_text(expected)
            for given, expected in zip(answer, self.answer)
        )


class PickerQuiz(Quiz):
    """Choose a number from a stepped range."""

    type: Literal[QuizType.PICKER] = Field(QuizType.PICKER, frozen=True)
    minimum: int = 0
    maximum: int
    step: int = Field(1, ge=1)
    answer: int

    @model_validator(mode="after")
    def validate_range(self) -> "PickerQuiz":
        if self.minimum >= self.maximum:
            raise ValueError("minimum must be smaller than maximum")
        if not self.minimum <= self.answer <= self.maximum:
            raise ValueError("answer must lie within [minimum, maximum]")
        if (self.answer - self.minimum) % self.step != 0:
            raise ValueError("answer must lie on the step grid starting at minimum")
        return self

    def is_answer_correct(self, answer: Optional[int]) -> bool:
        return answer is not None and answer == self.answer


class AlphaPickerQuiz(Quiz):
    """Choose a single letter of the alphabet."""

    type: Literal[QuizType.ALPHA_PICKER] = Field(QuizType.ALPHA_PICKER, frozen=True)
    answer: str

    @field_validator("answer")
    @classmethod
    def validate_letter(cls, value: str) -> str:
        letter = value.strip().upper()
        if len(letter) != 1 or letter not in string.ascii_uppercase:
            raise ValueError("answer must be a single letter A-Z")
        return letter

    def is_answer_correct(self, answer: Optional[str]) -> bool:
        return answer is not None and answer.strip().upper() == self.answer


AnyQuiz = Annotated[
    Union[
        TrueFalseQuiz,
        SingleSelectQuiz,
        FourQuickQuiz,
        MultiSelectQuiz,
        FillBlankQuiz,
        FillTwoBlanksQuiz,
        PickerQuiz,
        AlphaPickerQuiz,
    ],
    Field(discriminator="type"),
]

_QUIZ_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnyQuiz)


def parse_quiz(payload: Dict[str, Any]) -> Quiz:
    """Validate a raw content mapping into the quiz model selected by its `type` tag."""
    return _QUIZ_ADAPTER.validate_python(payload)
