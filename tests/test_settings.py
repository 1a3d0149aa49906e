"""Tests for the lazy settings system."""

import sys

import pytest

from roomwalk.conf import LazySettings, global_settings


def test_defaults_come_from_global_settings(monkeypatch) -> None:
    """Test that unconfigured settings expose the global defaults."""
    monkeypatch.setenv("ROOMWALK_SETTINGS_MODULE", "roomwalk_no_such_settings_module")
    lazy = LazySettings()

    assert not lazy.is_configured()
    assert lazy.PLAYER_SPEED == global_settings.PLAYER_SPEED == 5.0
    assert lazy.TICK_INTERVAL == 0.08
    assert lazy.IDLE_FRAME_TICKS == 5
    assert lazy.is_configured()


def test_user_settings_module_overrides(tmp_path, monkeypatch) -> None:
    """Test that uppercase names in the user's module override defaults."""
    (tmp_path / "walk_settings.py").write_text('PLAYER_SPEED = 7.5\nSPRITES_PATH = "art"\nlowercase = 1\n')
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv("ROOMWALK_SETTINGS_MODULE", "walk_settings")
    monkeypatch.delitem(sys.modules, "walk_settings", raising=False)
    lazy = LazySettings()

    assert lazy.PLAYER_SPEED == 7.5
    assert lazy.SPRITES_PATH == "art"
    assert lazy.SCREEN_WIDTH == 800
    assert not hasattr(lazy, "lowercase")


def test_configure_overrides() -> None:
    """Test programmatic configuration."""
    lazy = LazySettings()
    lazy.configure(PLAYER_SPEED=2.0, CUSTOM_FLAG=True)

    assert lazy.PLAYER_SPEED == 2.0
    assert lazy.CUSTOM_FLAG is True
    assert lazy.SCREEN_HEIGHT == 400


def test_error_inside_settings_module_is_raised(tmp_path, monkeypatch) -> None:
    """Test that a settings module with a broken import is not silently ignored."""
    (tmp_path / "broken_walk_settings.py").write_text("import roomwalk_no_such_dependency\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv("ROOMWALK_SETTINGS_MODULE", "broken_walk_settings")
    monkeypatch.delitem(sys.modules, "broken_walk_settings", raising=False)
    lazy = LazySettings()

    with pytest.raises(ModuleNotFoundError, match="roomwalk_no_such_dependency"):
        _ = lazy.PLAYER_SPEED
