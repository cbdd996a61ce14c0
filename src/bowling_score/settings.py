# settings.py - persisted user settings for Bowling Score
import os
import json

INTERFACES = ("console", "window")

# Defaults (may be overridden by persisted settings)
_DEFAULT_SETTINGS = {
    "interface": "console",   # console | window
    "player_name": "",        # up to 3 characters, shown in the window
    "log_level": "WARNING",
}

_CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)

# Environment overrides, applied after the settings file
_ENV_OVERRIDES = {
    "BOWLING_UI": "interface",
    "BOWLING_PLAYER": "player_name",
    "BOWLING_LOG_LEVEL": "log_level",
}


def _settings_dir() -> str:
    # Prefer %APPDATA% on Windows, else ~/.bowling_score
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "BowlingScore")
    return os.path.join(os.path.expanduser("~"), ".bowling_score")


def _settings_path() -> str:
    return os.path.join(_settings_dir(), "settings.json")


def get_current_settings():
    return dict(_CURRENT_SETTINGS)


def _normalise(values: dict) -> dict:
    interface = str(values.get("interface", "")).strip().lower()
    if interface not in INTERFACES:
        interface = _DEFAULT_SETTINGS["interface"]
    player = str(values.get("player_name", "")).strip().upper()[:3]
    level = str(values.get("log_level", "")).strip().upper() or _DEFAULT_SETTINGS["log_level"]
    return {"interface": interface, "player_name": player, "log_level": level}


def load_settings():
    """Reload settings from disk and the environment and return them."""
    global _CURRENT_SETTINGS
    merged = dict(_DEFAULT_SETTINGS)
    try:
        with open(_settings_path(), "r", encoding="utf-8") as f:
            data = json.load(f)
            if isinstance(data, dict):
                merged.update({k: data[k] for k in _DEFAULT_SETTINGS if k in data})
    except (OSError, ValueError):
        pass
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name, "").strip()
        if value:
            merged[key] = value
    _CURRENT_SETTINGS = _normalise(merged)
    return get_current_settings()
