from __future__ import annotations

import logging

from quizdeck.data_models import Avatar, Player
from quizdeck.errors import DeserializationError

from .preferences_store import PreferencesStore

logger = logging.getLogger(__name__)

PLAYER_PREFERENCES = "playerPreferences"
PREFERENCE_FIRST_NAME = f"{PLAYER_PREFERENCES}.firstName"
PREFERENCE_LAST_INITIAL = f"{PLAYER_PREFERENCES}.lastInitial"
PREFERENCE_AVATAR = f"{PLAYER_PREFERENCES}.avatar"


class PlayerPreferences:
    """
    Read and write the local `Player` under the `playerPreferences.*` keys.

    The three fields are always written and removed together. Missing keys read
    back as empty names and the first avatar.

    Examples
    --------
    >>> preferences = PlayerPreferences(PreferencesStore(Path("data/preferences/player.json")))
    >>> preferences.write(Player(first_name="Ada", last_initial="L", avatar=Avatar.TWO))
    >>> preferences.read().avatar
    <Avatar.TWO: 'TWO'>
    """

    def __init__(self, store: PreferencesStore):
        self.store = store

    def write(self, player: Player) -> None:
        """Overwrite all three player entries in a single edit."""
        (
            self.store.edit()
            .put(PREFERENCE_FIRST_NAME, player.first_name)
            .put(PREFERENCE_LAST_INITIAL, player.last_initial)
            .put(PREFERENCE_AVATAR, player.avatar.name)
            .apply()
        )
        logger.info("Saved player profile (avatar=%s)", player.avatar.name)

    def read(self) -> Player:
        """
        Rebuild the stored player, defaulting any missing entry.

        Raises
        ------
        DeserializationError
            If the stored avatar is not a known `Avatar` name, a name entry is not
            a string, or the backing file is unreadable.
        """
        data = self.store.load()
        first_name = data.get(PREFERENCE_FIRST_NAME, "")
        last_initial = data.get(PREFERENCE_LAST_INITIAL, "")
        avatar_name = data.get(PREFERENCE_AVATAR, Avatar.ONE.name)

        for key, value in (
            (PREFERENCE_FIRST_NAME, first_name),
            (PREFERENCE_LAST_INITIAL, last_initial),
        ):
            if not isinstance(value, str):
                raise DeserializationError(f"Preference {key} must be a string, got {value!r}.")

        try:
            avatar = Avatar[avatar_name]
        except (KeyError, TypeError) as exc:
            raise DeserializationError(f"Unknown avatar variant: {avatar_name!r}.") from exc

        return Player(first_name=first_name, last_initial=last_initial, avatar=avatar)

    def is_signed_in(self) -> bool:
        """A player counts as signed in once both name fields are stored and non-empty."""
        data = self.store.load()
        return bool(data.get(PREFERENCE_FIRST_NAME)) and bool(data.get(PREFERENCE_LAST_INITIAL))

    def sign_out(self) -> None:
        """Drop every player entry so the next `read()` returns the default player."""
        (
            self.store.edit()
            .remove(PREFERENCE_FIRST_NAME)
            .remove(PREFERENCE_LAST_INITIAL)
            .remove(PREFERENCE_AVATAR)
            .apply()
        )
        logger.info("Cleared player profile")
