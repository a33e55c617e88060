from __future__ import annotations

from typing import Dict, Optional, Type

from quizdeck.data_models import Category, Quiz, QuizType

from .base import AnsweredListener, QuizView, SubmitHandler
from .choice import MultiSelectQuizView, SelectItemQuizView, TrueFalseQuizView
from .pickers import AlphaPickerQuizView, PickerQuizView
from .text_entry import FillBlankQuizView, FillTwoBlanksQuizView

VIEW_TYPES: Dict[QuizType, Type[QuizView]] = {
    QuizType.TRUE_FALSE: TrueFalseQuizView,
    QuizType.SINGLE_SELECT: SelectItemQuizView,
    QuizType.FOUR_QUICK: SelectItemQuizView,
    QuizType.MULTI_SELECT: MultiSelectQuizView,
    QuizType.FILL_BLANK: FillBlankQuizView,
    QuizType.FILL_TWO_BLANKS: FillTwoBlanksQuizView,
    QuizType.PICKER: PickerQuizView,
    QuizType.ALPHA_PICKER: AlphaPickerQuizView,
}


def create_quiz_view(
    category: Category,
    quiz: Quiz,
    on_submit: Optional[SubmitHandler] = None,
    on_answered_changed: Optional[AnsweredListener] = None,
) -> QuizView:
    """
    Instantiate the view registered for the quiz's type tag.

    Raises
    ------
    ValueError
        If no view is registered for `quiz.type`.
    """
    view_type = VIEW_TYPES.get(quiz.type)
    if view_type is None:
        raise ValueError(f"No view registered for quiz type: {quiz.type}")
    return view_type(
        category,
        quiz,
        on_submit=on_submit,
        on_answered_changed=on_answered_changed,
    )
