"""Core: config, exception handlers, and application bootstrap.

Single place for settings and lifespan wiring.
"""

from catechesis.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
