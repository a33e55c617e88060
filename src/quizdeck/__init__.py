"""
Quizdeck.

Categorized quizzes with a per-question answer lifecycle, per-category scoring,
and a locally persisted player profile.
"""

from .config.loader import load_settings

__all__ = ["load_settings"]
