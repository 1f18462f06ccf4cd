"""Core: config, constants, limiter, exception handlers and lifespan.

Single place for settings and shared constants.
"""

from quicksearch.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
