from .base import ContentHandle, QuizView, QuizViewState
from .choice import MultiSelectQuizView, SelectItemQuizView, TrueFalseQuizView
from .factory import VIEW_TYPES, create_quiz_view
from .pickers import AlphaPickerQuizView, PickerQuizView
from .text_entry import FillBlankQuizView, FillTwoBlanksQuizView

__all__ = [
    "AlphaPickerQuizView",
    "ContentHandle",
    "FillBlankQuizView",
    "FillTwoBlanksQuizView",
    "MultiSelectQuizView",
    "PickerQuizView",
    "QuizView",
    "QuizViewState",
    "SelectItemQuizView",
    "TrueFalseQuizView",
    "VIEW_TYPES",
    "create_quiz_view",
]
