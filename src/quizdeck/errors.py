from __future__ import annotations


class QuizdeckError(Exception):
    """Base class for errors raised by quizdeck."""


class UnknownQuizError(QuizdeckError):
    """A quiz was scored against a category that does not own it."""


class AlreadySubmittedError(QuizdeckError):
    """An answer was changed or submitted after the view reached SUBMITTED."""


class DeserializationError(QuizdeckError):
    """Persisted preferences could not be turned back into a model."""
