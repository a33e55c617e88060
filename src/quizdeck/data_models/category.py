from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, PrivateAttr

from quizdeck.errors import AlreadySubmittedError, UnknownQuizError

from .quiz import AnyQuiz, Quiz

logger = logging.getLogger(__name__)


class Category(BaseModel):
    """
    Named, ordered group of quizzes sharing one cumulative score.

    `set_score` is the only entry point that changes `score` or `results`. It is
    guarded by a per-category lock so several views may report results from
    different threads (e.g. a headless harness evaluating quizzes in parallel).

    Attributes
    ----------
    id : str
        Stable identifier used to look the category up.
    name : str
        Display name, e.g. "Geography".
    quizzes : List[Quiz]
        Questions in presentation order. Owned by this category; never shared.
    score : int
        Number of quizzes answered correctly so far. Only ever increases.
    results : Dict[int, bool]
        Outcome per quiz position, filled in as answers are submitted.
    """

    id: str
    name: str
    quizzes: List[AnyQuiz] = Field(default_factory=list)
    score: int = Field(0, ge=0)
    results: Dict[int, bool] = Field(default_factory=dict)

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def index_of(self, quiz: Quiz) -> int:
        """Return the position of `quiz` in this category, matching by identity."""
        for position, candidate in enumerate(self.quizzes):
            if candidate is quiz:
                return position
        raise UnknownQuizError(
            f"Quiz {quiz.question!r} does not belong to category {self.id!r}."
        )

    def set_score(self, quiz: Quiz, correct: bool) -> None:
        """
        Record the outcome for `quiz` and bump the score when it was answered correctly.

        Raises
        ------
        UnknownQuizError
            If `quiz` is not one of this category's quizzes. Nothing is recorded.
        AlreadySubmittedError
            If a result was already recorded for `quiz`. The score is unchanged.
        """
        with self._lock:
            position = self.index_of(quiz)
            if position in self.results:
                raise AlreadySubmittedError(
                    f"Quiz {quiz.question!r} in category {self.id!r} was already scored."
                )
            self.results[position] = correct
            if correct:
                self.score += 1
            score = self.score
        logger.debug(
            "Scored quiz %d in %s: correct=%s score=%d", position, self.id, correct, score
        )

    def result_for(self, quiz: Quiz) -> Optional[bool]:
        """Return the recorded outcome for `quiz`, or None while it is unanswered."""
        return self.results.get(self.index_of(quiz))

    def first_unsolved_position(self) -> int:
        """Index of the first unsolved quiz, or `len(quizzes)` once every quiz is solved."""
        for position, quiz in enumerate(self.quizzes):
            if not quiz.solved:
                return position
        return len(self.quizzes)

    @property
    def is_solved(self) -> bool:
        return all(quiz.solved for quiz in self.quizzes)
