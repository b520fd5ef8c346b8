"""Tests for theme colors and config defaults."""
import importlib

from credgen import config
from gui import theme


def test_strength_colors_follow_palette():
    colors = theme.get_colors()
    assert theme.get_strength_color("Weak") == colors["strength_weak"]
    assert theme.get_strength_color("Fair") == colors["strength_fair"]
    assert theme.get_strength_color("Good") == colors["strength_good"]
    assert theme.get_strength_color("Strong") == colors["strength_strong"]


def test_unknown_label_is_muted():
    assert theme.get_strength_color("None") == theme.get_colors()["text_muted"]


def test_palettes_have_same_keys():
    assert set(theme.DARK) == set(theme.LIGHT)


def test_config_env_overrides(monkeypatch):
    monkeypatch.setenv("CREDGEN_THEME", "LIGHT")
    monkeypatch.setenv("CREDGEN_LOG_LEVEL", "debug")
    try:
        importlib.reload(config)
        assert config.THEME == "light"
        assert config.LOG_LEVEL == "DEBUG"
    finally:
        monkeypatch.delenv("CREDGEN_THEME")
        monkeypatch.delenv("CREDGEN_LOG_LEVEL")
        importlib.reload(config)


def test_config_unknown_theme_falls_back(monkeypatch):
    monkeypatch.setenv("CREDGEN_THEME", "solarized")
    try:
        importlib.reload(config)
        assert config.THEME == "dark"
    finally:
        monkeypatch.delenv("CREDGEN_THEME")
        importlib.reload(config)


def test_docstring_names_existing_functions():
    import re

    for name in re.findall(r"(\w+)\(\)", theme.__doc__):
        assert hasattr(theme, name), name
