import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from app.schemas.view import Theme

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Ignoring unreadable preferences at %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _write_json(path: Path, data: Dict[str, Any]):
    path.parent.mkdir(parents=True, exist_ok=True)
    # Replace in one step so a crash never leaves a truncated file behind
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=path.name, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
        os.replace(tmp, path)
    except OSError:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise


def theme_from_hint(system_hint: Optional[str]) -> Theme:
    """Map a prefers-color-scheme hint onto a theme; light unless told dark."""
    hint = (system_hint or "").strip().strip('"').lower()
    return Theme.DARK if hint == Theme.DARK.value else Theme.LIGHT


class ThemeStore:
    """Light/dark preference persisted in a local JSON file.

    Storage never raises: an unreadable file reads as "no preference" and a
    failed write leaves only the in-memory theme changed.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._current: Optional[Theme] = None

    @property
    def current(self) -> Optional[Theme]:
        return self._current

    def load(self) -> Optional[Theme]:
        value = _read_json(self.path).get(THEME_KEY)
        try:
            return Theme(value)
        except ValueError:
            return None

    def get_initial_theme(self, system_hint: Optional[str] = None) -> Theme:
        return self.load() or theme_from_hint(system_hint)

    def initialize(self, system_hint: Optional[str] = None) -> Theme:
        if self._current is None:
            self.apply_theme(self.get_initial_theme(system_hint))
        return self._current

    def apply_theme(self, theme: Theme) -> Theme:
        theme = Theme(theme)
        self._current = theme
        try:
            data = _read_json(self.path)
            data[THEME_KEY] = theme.value
            _write_json(self.path, data)
        except OSError as e:
            logger.warning("Could not persist theme to %s: %s", self.path, e)
        return theme

    def toggle_theme(self, system_hint: Optional[str] = None) -> Theme:
        current = self._current or self.get_initial_theme(system_hint)
        return self.apply_theme(current.opposite)
