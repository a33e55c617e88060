from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from quizdeck.data_models import Category, Quiz, QuizType
from quizdeck.errors import AlreadySubmittedError

logger = logging.getLogger(__name__)


class QuizViewState(str, Enum):
    UNANSWERED = "UNANSWERED"
    ANSWERED = "ANSWERED"
    SUBMITTED = "SUBMITTED"


@dataclass(frozen=True, eq=False)
class ContentHandle:
    """Description of the input surface a view offers for its quiz. Compared and hashed by identity."""

    kind: str
    quiz_type: QuizType
    prompt: str
    options: Tuple[str, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)


SubmitHandler = Callable[[ContentHandle], None]
AnsweredListener = Callable[[bool], None]


class QuizView(ABC):
    """
    Answer lifecycle for one quiz shown to the player.

    Concrete views hold the player's candidate answer and implement
    `create_content_view` and `is_answer_correct`. Whenever the candidate answer
    becomes usable they call `allow_answer`; the host then calls `submit_answer`.

    State machine::

        UNANSWERED --allow_answer(True)--> ANSWERED
        ANSWERED --allow_answer(False)--> UNANSWERED
        UNANSWERED | ANSWERED --submit_answer()--> SUBMITTED

    SUBMITTED is terminal. Any later `allow_answer` or `submit_answer` call raises
    `AlreadySubmittedError`, as does any call on a view whose quiz was already
    solved elsewhere, so a quiz is scored at most once.

    Parameters
    ----------
    category : Category
        Category owning `quiz`; receives the result through `Category.set_score`.
    quiz : Quiz
        The quiz this view is bound to for its whole lifetime.
    on_submit : Callable[[ContentHandle], None], optional
        Hook of the hosting screen, called first on submission with this view's
        content handle.
    on_answered_changed : Callable[[bool], None], optional
        Called whenever the answered flag flips, so a rendering layer can show or
        hide its submit affordance.
    """

    def __init__(
        self,
        category: Category,
        quiz: Quiz,
        on_submit: Optional[SubmitHandler] = None,
        on_answered_changed: Optional[AnsweredListener] = None,
    ):
        self.category = category
        self.quiz = quiz
        self._on_submit = on_submit
        self._on_answered_changed = on_answered_changed
        self._answered = False
        self._submitted = False
        self.content = self.create_content_view()

    @abstractmethod
    def create_content_view(self) -> ContentHandle:
        """Build the input surface for this quiz type without touching the data model."""

    @abstractmethod
    def is_answer_correct(self) -> bool:
        """Rate the answer currently held by the view against the quiz."""

    @property
    def state(self) -> QuizViewState:
        if self._submitted:
            return QuizViewState.SUBMITTED
        if self._answered:
            return QuizViewState.ANSWERED
        return QuizViewState.UNANSWERED

    def is_answered(self) -> bool:
        return self._answered

    def allow_answer(self, answered: Optional[bool] = None) -> None:
        """
        Mark the quiz as ready (or no longer ready) for submission.

        Without an argument the quiz is marked answered only if it is not already,
        which keeps repeated selections from churning listeners.
        """
        self._ensure_not_submitted()
        if answered is None:
            if not self.is_answered():
                self.allow_answer(True)
            return
        changed = answered != self._answered
        self._answered = answered
        if changed and self._on_answered_changed is not None:
            self._on_answered_changed(answered)

    def submit_answer(self) -> bool:
        """
        Submit the held answer: notify the host, mark the quiz solved, then score it.

        Submitting without a prior `allow_answer` is permitted and rates whatever
        default answer the view holds. Returns whether the answer was correct.

        The answer is rated and the host notified before any state changes; if
        either raises, the view and the quiz are left as they were and the
        submission can be retried.
        """
        self._ensure_not_submitted()
        correct = self.is_answer_correct()
        if self._on_submit is not None:
            self._on_submit(self.content)
        self._submitted = True
        self.quiz.mark_solved()
        self.category.set_score(self.quiz, correct)
        logger.info(
            "Submitted %s answer in %s: correct=%s",
            self.quiz.type.value,
            self.category.id,
            correct,
        )
        return correct

    def _ensure_not_submitted(self) -> None:
        if self._submitted or self.quiz.solved:
            raise AlreadySubmittedError(
                f"Answer for {self.quiz.question!r} has already been submitted."
            )
