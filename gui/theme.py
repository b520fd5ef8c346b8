"""
theme.py - Colors for the generator window, dark and light.

All colors live here so the window stays consistent. Widgets read
get_colors() when they are built.
"""

from credgen import config


# Current mode: "dark" or "light"
_current_mode = config.THEME

DARK = {
    # Backgrounds
    "bg_primary": "#0f1117",
    "bg_card": "#1c2333",
    "bg_input": "#232b3e",
    "bg_hover": "#2a3346",

    # Accent
    "accent": "#4f8ff7",
    "accent_hover": "#3a7ae0",

    # Status
    "success": "#3fb950",
    "error": "#f85149",

    # Text
    "text_primary": "#e6edf3",
    "text_secondary": "#8b949e",
    "text_muted": "#484f58",

    # Borders
    "border": "#30363d",

    # Strength meter
    "strength_weak": "#f85149",
    "strength_fair": "#f0883e",
    "strength_good": "#d29922",
    "strength_strong": "#3fb950",
}

LIGHT = {
    # Backgrounds
    "bg_primary": "#ffffff",
    "bg_card": "#f6f8fa",
    "bg_input": "#eaeef2",
    "bg_hover": "#d0d7de",

    # Accent
    "accent": "#0969da",
    "accent_hover": "#0550ae",

    # Status
    "success": "#1a7f37",
    "error": "#cf222e",

    # Text
    "text_primary": "#1f2328",
    "text_secondary": "#656d76",
    "text_muted": "#8c959f",

    # Borders
    "border": "#d0d7de",

    # Strength meter
    "strength_weak": "#cf222e",
    "strength_fair": "#bc4c00",
    "strength_good": "#9a6700",
    "strength_strong": "#1a7f37",
}


def get_colors() -> dict:
    """Get the current theme's color palette."""
    return DARK if _current_mode == "dark" else LIGHT


def get_mode() -> str:
    return _current_mode


def get_strength_color(strength_label: str) -> str:
    """Get the color for a strength label ("Weak" ... "Strong")."""
    colors = get_colors()
    mapping = {
        "Weak": colors["strength_weak"],
        "Fair": colors["strength_fair"],
        "Good": colors["strength_good"],
        "Strong": colors["strength_strong"],
    }
    return mapping.get(strength_label, colors["text_muted"])
