"""
Light/dark display preference.

The user's explicit choice is stored as JSON on disk; without one the page
follows the browser's preferred colour scheme.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
SYSTEM = "system"
DEFAULT_THEME = "light"

PREFS_ENV_VAR = "WETBULB_PREFS_PATH"
DEFAULT_PREFS_PATH = Path.home() / ".wetbulb" / "preferences.json"
THEME_KEY = "theme"

# ---------- Palettes ----------
PALETTES = {
    "light": {"background": "#ffffff", "sidebar": "#f0f2f6", "text": "#31333f"},
    "dark": {"background": "#0e1117", "sidebar": "#262730", "text": "#fafafa"},
}


def preferences_path() -> Path:
    override = os.environ.get(PREFS_ENV_VAR)
    return Path(override) if override else DEFAULT_PREFS_PATH


def _read(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable preferences file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring preferences file %s: expected a JSON object", path)
        return {}
    return data


def load_override(path: Optional[Path] = None) -> Optional[str]:
    """
    Return the stored theme override ("light" or "dark"), or None if the
    user has not chosen one.
    """
    path = path or preferences_path()
    theme = _read(path).get(THEME_KEY)
    if theme is None:
        return None
    if theme not in THEMES:
        logger.warning("Ignoring unknown theme %r in %s", theme, path)
        return None
    return theme


def save_override(theme: Optional[str], path: Optional[Path] = None) -> None:
    """
    Persist the theme override. None or "system" clears it so the page
    follows the browser again. Other keys in the file are preserved.
    """
    if theme is not None and theme != SYSTEM and theme not in THEMES:
        raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES + (SYSTEM,)}")

    path = path or preferences_path()
    data = _read(path)
    if theme in THEMES:
        data[THEME_KEY] = theme
    else:
        data.pop(THEME_KEY, None)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.info("Theme override set to %s (%s)", theme or SYSTEM, path)


def resolve_theme(override: Optional[str], system: Optional[str]) -> str:
    if override in THEMES:
        return override
    if system in THEMES:
        return system
    return DEFAULT_THEME


def theme_css(theme: str) -> str:
    """CSS block recolouring the Streamlit page for the given theme."""
    palette = PALETTES[theme]
    return f"""
<style>
[data-testid="stAppViewContainer"], [data-testid="stHeader"] {{
    background-color: {palette['background']};
    color: {palette['text']};
}}
[data-testid="stSidebar"] {{
    background-color: {palette['sidebar']};
}}
[data-testid="stAppViewContainer"] *, [data-testid="stSidebar"] * {{
    color: {palette['text']};
}}
</style>
"""
