from .category import Category
from .player import Avatar, Player
from .quiz import (
    AlphaPickerQuiz,
    AnyQuiz,
    FillBlankQuiz,
    FillTwoBlanksQuiz,
    FourQuickQuiz,
    MultiSelectQuiz,
    PickerQuiz,
    Quiz,
    QuizType,
    SingleSelectQuiz,
    TrueFalseQuiz,
    parse_quiz,
)

__all__ = [
    "AlphaPickerQuiz",
    "AnyQuiz",
    "Avatar",
    "Category",
    "FillBlankQuiz",
    "FillTwoBlanksQuiz",
    "FourQuickQuiz",
    "MultiSelectQuiz",
    "PickerQuiz",
    "Player",
    "Quiz",
    "QuizType",
    "SingleSelectQuiz",
    "TrueFalseQuiz",
    "parse_quiz",
]
