from __future__ import annotations

from typing import Callable, List, Optional

from quizdeck.data_models import Category
from quizdeck.utils.logging import get_logger
from quizdeck.views import ContentHandle, QuizView, create_quiz_view

logger = get_logger(__name__)


class CategorySession:
    """
    Hosting controller that walks a player through one category.

    One view is created per quiz and each view is given `on_answer_submitted` as
    its submission hook. The session starts at the first unsolved quiz and moves
    forward every time a view submits. Drive submissions through `submit()` so
    `on_finished` fires after the last result has been scored.
    """

    def __init__(
        self,
        category: Category,
        on_finished: Optional[Callable[[Category], None]] = None,
    ):
        self.category = category
        self._on_finished = on_finished
        self._finished_notified = False
        self.submissions: List[ContentHandle] = []
        self.views: List[QuizView] = [
            create_quiz_view(category, quiz, on_submit=self.on_answer_submitted)
            for quiz in category.quizzes
        ]
        self.position = category.first_unsolved_position()

    @property
    def is_finished(self) -> bool:
        return self.position >= len(self.views)

    @property
    def current_view(self) -> Optional[QuizView]:
        if self.is_finished:
            return None
        return self.views[self.position]

    def on_answer_submitted(self, handle: ContentHandle) -> None:
        """Submission hook handed to every view; advances to the next unsolved quiz."""
        position = next(
            (index for index, view in enumerate(self.views) if view.content is handle),
            None,
        )
        if position is None:
            raise ValueError("Submission handle does not belong to a view of this session.")
        self.submissions.append(handle)
        logger.info(
            "answer_submitted",
            category=self.category.id,
            position=position,
            quiz_type=handle.quiz_type.value,
        )
        # Views submitted out of order are skipped once the session reaches them.
        if position != self.position:
            return
        self.position += 1
        while not self.is_finished and self.views[self.position].quiz.solved:
            self.position += 1

    def submit(self) -> bool:
        """Submit the current view's answer and report whether it was correct."""
        view = self.current_view
        if view is None:
            raise RuntimeError(f"Category {self.category.id} has no quiz left to answer.")
        correct = view.submit_answer()
        if self.is_finished and not self._finished_notified:
            self._finished_notified = True
            logger.info(
                "category_finished",
                category=self.category.id,
                score=self.category.score,
                total=len(self.category.quizzes),
            )
            if self._on_finished is not None:
                self._on_finished(self.category)
        return correct
