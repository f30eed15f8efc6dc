__all__ = ["__version__", "create_character", "level_up"]
__version__ = "0.1.0"

# handy re-export for convenience
from .characters import create_character, level_up  # noqa: F401
