from .player_preferences import PlayerPreferences
from .preferences_store import PreferencesEditor, PreferencesStore

__all__ = ["PlayerPreferences", "PreferencesEditor", "PreferencesStore"]
