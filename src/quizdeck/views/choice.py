from __future__ import annotations

from typing import Iterable, Optional, Set

from quizdeck.data_models import FourQuickQuiz, MultiSelectQuiz, SingleSelectQuiz, TrueFalseQuiz

from .base import ContentHandle, QuizView


class TrueFalseQuizView(QuizView):
    quiz: TrueFalseQuiz

    def __init__(self, *args, **kwargs):
        self.answer: Optional[bool] = None
        super().__init__(*args, **kwargs)

    def create_content_view(self) -> ContentHandle:
        return ContentHandle(
            kind="true_false",
            quiz_type=self.quiz.type,
            prompt=self.quiz.question,
            options=("True", "False"),
        )

    def choose(self, value: bool) -> None:
        self.answer = value
        self.allow_answer()

    def is_answer_correct(self) -> bool:
        return self.quiz.is_answer_correct(self.answer)


class SelectItemQuizView(QuizView):
    """Single selection, shown as a list or, for four-quick quizzes, as a 2x2 grid."""

    quiz: SingleSelectQuiz

    def __init__(self, *args, **kwargs):
        self.selected: Optional[int] = None
        super().__init__(*args, **kwargs)

    def create_content_view(self) -> ContentHandle:
        kind = "option_grid" if isinstance(self.quiz, FourQuickQuiz) else "option_list"
        return ContentHandle(
            kind=kind,
            quiz_type=self.quiz.type,
            prompt=self.quiz.question,
            options=tuple(self.quiz.options),
        )

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.quiz.options):
            raise IndexError(f"option {index} does not exist")
        self.selected = index
        self.allow_answer()

    def is_answer_correct(self) -> bool:
        return self.quiz.is_answer_correct(self.selected)


class MultiSelectQuizView(QuizView):
    quiz: MultiSelectQuiz

    def __init__(self, *args, **kwargs):
        self.selection: Set[int] = set()
        super().__init__(*args, **kwargs)

    def create_content_view(self) -> ContentHandle:
        return ContentHandle(
            kind="checkbox_list",
            quiz_type=self.quiz.type,
            prompt=self.quiz.question,
            options=tuple(self.quiz.options),
        )

    def toggle(self, index: int) -> None:
        """Flip one option; the quiz counts as answered while anything is checked."""
        if not 0 <= index < len(self.quiz.options):
            raise IndexError(f"option {index} does not exist")
        if index in self.selection:
            self.selection.discard(index)
        else:
            self.selection.add(index)
        self.allow_answer(bool(self.selection))

    def set_selection(self, indices: Iterable[int]) -> None:
        """Replace the whole selection; nothing changes if any index is out of range."""
        selection = set(indices)
        for index in selection:
            if not 0 <= index < len(self.quiz.options):
                raise IndexError(f"option {index} does not exist")
        self.selection = selection
        self.allow_answer(bool(self.selection))

    def is_answer_correct(self) -> bool:
        return self.quiz.is_answer_correct(self.selection)
