"""Persisted user preferences.

Hides where the single surviving setting (dark mode) is stored. Everything
else in the app lives only for the process lifetime.
"""

import json
import os
from pathlib import Path

DARK_MODE_KEY = "darkMode"
PREFERENCES_ENV_VAR = "ARIA_PREFERENCES_PATH"


def default_preferences_path() -> Path:
    """Location of the preferences file.

    Uses $ARIA_PREFERENCES_PATH when set, otherwise
    ~/.config/aria/preferences.json.
    """
    override = os.getenv(PREFERENCES_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "aria" / "preferences.json"


class ThemePreference:
    """Dark/light choice stored as a JSON boolean under a fixed key."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else default_preferences_path()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> bool:
        """Return True when dark mode was saved; False if unset or unreadable."""
        return self._read().get(DARK_MODE_KEY) is True

    def save(self, dark: bool) -> None:
        """Store the choice, keeping any other keys in the file."""
        data = self._read()
        data[DARK_MODE_KEY] = bool(dark)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def toggle(self) -> bool:
        """Flip and store the choice. Returns the new value."""
        dark = not self.load()
        self.save(dark)
        return dark
