from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Dict, Optional, Set

from quizdeck.errors import DeserializationError


class PreferencesStore:
    """
    String key-value namespace persisted as a single JSON object on disk.

    Reads always go to disk. Writes are batched through `edit()` and committed
    by writing a sibling temp file and renaming it over the original, so a
    reader never observes half of an edit.
    """

    def __init__(self, path: Path):
        """Ensure the backing directory exists and record the JSON filepath."""
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def load(self) -> Dict[str, str]:
        """Return every stored entry; a missing file reads as an empty namespace."""
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise DeserializationError(
                    f"Preferences file {self.path} does not contain valid JSON."
                ) from exc
        if not isinstance(data, dict):
            raise DeserializationError(
                f"Preferences file {self.path} must contain a JSON object."
            )
        return data

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.load().get(key, default)

    def edit(self) -> "PreferencesEditor":
        return PreferencesEditor(self)

    def commit(self, puts: Dict[str, str], removals: Set[str]) -> None:
        """Apply `removals` then `puts` to the stored namespace in one atomic rewrite."""
        with self._lock:
            data = self.load()
            for key in removals:
                data.pop(key, None)
            data.update(puts)
            staging = self.path.with_name(self.path.name + ".tmp")
            with staging.open("w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2, sort_keys=True)
            os.replace(staging, self.path)


class PreferencesEditor:
    """Collects changes for a `PreferencesStore` until `apply()` writes them together."""

    def __init__(self, store: PreferencesStore):
        self._store = store
        self._puts: Dict[str, str] = {}
        self._removals: Set[str] = set()

    def put(self, key: str, value: str) -> "PreferencesEditor":
        self._puts[key] = value
        self._removals.discard(key)
        return self

    def remove(self, key: str) -> "PreferencesEditor":
        self._removals.add(key)
        self._puts.pop(key, None)
        return self

    def apply(self) -> None:
        self._store.commit(dict(self._puts), set(self._removals))
        self._puts.clear()
        self._removals.clear()
