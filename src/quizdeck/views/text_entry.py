from __future__ import annotations

from typing import List

from quizdeck.data_models import FillBlankQuiz, FillTwoBlanksQuiz

from .base import ContentHandle, QuizView


class FillBlankQuizView(QuizView):
    quiz: FillBlankQuiz

    def __init__(self, *args, **kwargs):
        self.text = ""
        super().__init__(*args, **kwargs)

    def create_content_view(self) -> ContentHandle:
        return ContentHandle(
            kind="text_field",
            quiz_type=self.quiz.type,
            prompt=self.quiz.question,
            extra={"start": self.quiz.start, "end": self.quiz.end},
        )

    def enter_text(self, text: str) -> None:
        self.text = text
        self.allow_answer(bool(text.strip()))

    def is_answer_correct(self) -> bool:
        return self.quiz.is_answer_correct(self.text)


class FillTwoBlanksQuizView(QuizView):
    quiz: FillTwoBlanksQuiz

    def __init__(self, *args, **kwargs):
        self.texts: List[str] = ["", ""]
        super().__init__(*args, **kwargs)

    def create_content_view(self) -> ContentHandle:
        return ContentHandle(
            kind="two_text_fields",
            quiz_type=self.quiz.type,
            prompt=self.quiz.question,
        )

    def enter_text(self, position: int, text: str) -> None:
        """Fill blank 0 or 1; answered only once both blanks hold text."""
        if position not in (0, 1):
            raise IndexError(f"blank {position} does not exist")
        self.texts[position] = text
        self.allow_answer(all(value.strip() for value in self.texts))

    def is_answer_correct(self) -> bool:
        return self.quiz.is_answer_correct(self.texts)
