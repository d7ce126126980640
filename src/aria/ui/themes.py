"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)
- Dark/light mode configuration

Both themes are registered at startup; the stored preference picks one.
"""

from textual.theme import Theme

from .config import THEME_DARK, THEME_LIGHT

# Catppuccin Mocha with ARIA's purple/blue accents
ARIA_DARK = Theme(
    name=THEME_DARK,
    primary="#cba6f7",      # Mauve - ARIA accent
    secondary="#89b4fa",    # Blue
    accent="#94e2d5",       # Teal
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",
    warning="#fab387",
    error="#f38ba8",
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "block-cursor-foreground": "#11111b",
        "block-cursor-background": "#f5e0dc",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#cdd6f4",
        "input-cursor-foreground": "#11111b",
        "input-selection-background": "#cba6f7 30%",
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#cba6f7",
        "scrollbar-background": "#181825",
        "footer-foreground": "#bac2de",
        "footer-background": "#11111b",
        "footer-key-foreground": "#f9e2af",
        "text-muted": "#6c7086",
    },
)

# Catppuccin Latte counterpart
ARIA_LIGHT = Theme(
    name=THEME_LIGHT,
    primary="#8839ef",      # Mauve
    secondary="#1e66f5",    # Blue
    accent="#179299",       # Teal
    foreground="#4c4f69",
    background="#eff1f5",
    success="#40a02b",
    warning="#fe640b",
    error="#d20f39",
    surface="#e6e9ef",
    panel="#dce0e8",
    dark=False,
    variables={
        "block-cursor-foreground": "#eff1f5",
        "block-cursor-background": "#dc8a78",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#4c4f69",
        "input-cursor-foreground": "#eff1f5",
        "input-selection-background": "#8839ef 25%",
        "border": "#acb0be",
        "border-blurred": "#ccd0da",
        "scrollbar": "#ccd0da",
        "scrollbar-hover": "#acb0be",
        "scrollbar-active": "#8839ef",
        "scrollbar-background": "#dce0e8",
        "footer-foreground": "#5c5f77",
        "footer-background": "#dce0e8",
        "footer-key-foreground": "#df8e1d",
        "text-muted": "#8c8fa1",
    },
)

THEMES = (ARIA_DARK, ARIA_LIGHT)


def theme_name(dark: bool) -> str:
    """Name of the registered theme for a dark-mode flag."""
    return THEME_DARK if dark else THEME_LIGHT
