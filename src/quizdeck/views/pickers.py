from __future__ import annotations

import string
from typing import Optional

from quizdeck.data_models import AlphaPickerQuiz, PickerQuiz

from .base import ContentHandle, QuizView


class PickerQuizView(QuizView):
    """Stepped number picker; starts at the quiz minimum."""

    quiz: PickerQuiz

    def __init__(self, category, quiz: PickerQuiz, *args, **kwargs):
        self.value = quiz.minimum
        super().__init__(category, quiz, *args, **kwargs)

    def create_content_view(self) -> ContentHandle:
        return ContentHandle(
            kind="number_picker",
            quiz_type=self.quiz.type,
            prompt=self.quiz.question,
            extra={
                "minimum": self.quiz.minimum,
                "maximum": self.quiz.maximum,
                "step": self.quiz.step,
            },
        )

    def set_value(self, value: int) -> int:
        """Clamp `value` into range, snap it down onto the step grid, and keep it."""
        clamped = max(self.quiz.minimum, min(self.quiz.maximum, value))
        steps = (clamped - self.quiz.minimum) // self.quiz.step
        self.value = self.quiz.minimum + steps * self.quiz.step
        self.allow_answer()
        return self.value

    def is_answer_correct(self) -> bool:
        return self.quiz.is_answer_correct(self.value)


class AlphaPickerQuizView(QuizView):
    quiz: AlphaPickerQuiz

    def __init__(self, *args, **kwargs):
        self.letter: Optional[str] = None
        super().__init__(*args, **kwargs)

    def create_content_view(self) -> ContentHandle:
        return ContentHandle(
            kind="letter_picker",
            quiz_type=self.quiz.type,
            prompt=self.quiz.question,
            options=tuple(string.ascii_uppercase),
        )

    def set_letter(self, letter: str) -> None:
        normalized = letter.strip().upper()
        if len(normalized) != 1 or normalized not in string.ascii_uppercase:
            raise ValueError(f"{letter!r} is not a single letter A-Z")
        self.letter = normalized
        self.allow_answer()

    def is_answer_correct(self) -> bool:
        return self.quiz.is_answer_correct(self.letter)
