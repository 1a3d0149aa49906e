"""Settings for roomwalk.

Defaults live in ``roomwalk.conf.global_settings``. A project can override any
of them with a plain module of UPPERCASE names::

    # walk_settings.py
    SPRITES_PATH = "art/player"
    PLAYER_SPEED = 6.0

and select it with ``ROOMWALK_SETTINGS_MODULE=walk_settings``. Without the
variable a top-level ``settings`` module is used when one is importable.
Tests bypass both with ``settings.configure(...)``.
"""

import importlib
import logging
import os
from typing import Any

from roomwalk.conf import global_settings

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLE = "ROOMWALK_SETTINGS_MODULE"
DEFAULT_SETTINGS_MODULE = "settings"


class Settings:
    """Holds the global defaults, overridden by the selected settings module."""

    def __init__(self, settings_module: str | None = None) -> None:
        """Copy the defaults, then apply the overrides from settings_module."""
        for name in dir(global_settings):
            if name.isupper():
                setattr(self, name, getattr(global_settings, name))

        if settings_module is None:
            return
        try:
            module = importlib.import_module(settings_module)
        except ModuleNotFoundError as exc:
            # Only a missing settings module means "use the defaults"
            if exc.name != settings_module:
                raise
            logger.debug("No settings module %r, using defaults", settings_module)
            return

        for name in dir(module):
            if name.isupper():
                setattr(self, name, getattr(module, name))


class LazySettings:
    """Builds the Settings on first attribute access."""

    def __init__(self) -> None:
        """Start unconfigured."""
        self._wrapped: Settings | None = None

    def _settings(self) -> Settings:
        if self._wrapped is None:
            self._wrapped = Settings(os.environ.get(ENVIRONMENT_VARIABLE, DEFAULT_SETTINGS_MODULE))
        return self._wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Look the setting up, loading settings first if needed."""
        return getattr(self._settings(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Override a single setting at runtime."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            setattr(self._settings(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Apply overrides on top of the defaults without reading any module.

        Example:
            settings.configure(SPRITES_PATH="tests/sprites", TICK_INTERVAL=0.05)
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check whether settings have been built yet."""
        return self._wrapped is not None


settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
