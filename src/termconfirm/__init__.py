"""Interactive yes/no confirmation prompts for terminal applications."""

from .confirm import Confirm, ConfirmConfig
from .term import Term
from .theme import ColorfulTheme, SimpleTheme, TermThemeRenderer, Theme, get_theme

__all__ = [
    "Confirm",
    "ConfirmConfig",
    "Term",
    "Theme",
    "SimpleTheme",
    "ColorfulTheme",
    "TermThemeRenderer",
    "get_theme",
]
