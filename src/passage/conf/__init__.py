"""Django-like settings system for Passage.

Usage:
    # In your game project's settings.py
    from passage.conf import global_settings

    # Override defaults
    INITIAL_SCENE = "lobby"
    DOORWAY_CLOSE_DELAY = 1.2

    # Add authored doorway alignment fixes
    DOORWAY_POSITION_OVERRIDES = {
        **global_settings.DOORWAY_POSITION_OVERRIDES,
        ("lobby", "north"): (7.5, 0.0),
    }

    # In your game code
    from passage.conf import settings

    print(settings.DOORWAY_CLOSE_DELAY)  # 1.2
"""

import importlib
import os
from typing import Any

from passage.conf import global_settings


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    Settings are loaded from:
    1. global_settings (framework defaults)
    2. User's settings module (overrides)

    The settings module location is determined by:
    - PASSAGE_SETTINGS_MODULE environment variable, or
    - Convention: "settings" module in current directory
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load settings from global_settings and user's settings module."""
        settings_module = os.environ.get("PASSAGE_SETTINGS_MODULE", "settings")

        self._wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
        except ImportError:
            # No user settings module found, use defaults only
            return

        for setting in dir(mod):
            if setting.isupper():
                setattr(self._wrapped, setting, getattr(mod, setting))

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            if self._wrapped is None:
                self._setup()
            if self._wrapped is None:
                msg = "Settings could not be loaded"
                raise RuntimeError(msg)
            setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        Example:
            settings.configure(
                DOORWAY_CLOSE_DELAY=0.8,
                DOORWAY_TRANSITION_COOLDOWN=0.5,
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
