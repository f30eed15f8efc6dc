import os
from pathlib import Path

TRUTHY = ("1", "true", "yes", "on")


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY


def strict_choices_enabled() -> bool:
    """Return True if ancestry/background choice mismatches should be rejected."""
    return _flag("CHARFORGE_STRICT_CHOICES")


def log_level() -> str:
    return os.getenv("CHARFORGE_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def data_dir() -> Path:
    # default: characters live next to where the CLI runs
    return Path(os.getenv("CHARFORGE_DATA_DIR", ".")).expanduser()
