"""Configuration management for termconfirm."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .confirm import Confirm
from .theme import THEMES, get_theme


def _env_flag(name: str, default: bool) -> bool:
    # An empty value counts as unset
    value = os.getenv(name, "").strip()
    if not value:
        return default
    return value.lower() == "true"


class Config:
    """Prompt defaults loaded from .env and the environment."""

    def __init__(self, project_dir: Optional[Path] = None):
        """Initialize config from .env in the project directory."""
        self.project_dir = project_dir or Path.cwd()

        load_dotenv(self.project_dir / ".env")

        self.theme = (os.getenv("TERMCONFIRM_THEME") or "simple").lower()
        self.wait_for_newline = _env_flag("TERMCONFIRM_WAIT_FOR_NEWLINE", False)
        self.show_default = _env_flag("TERMCONFIRM_SHOW_DEFAULT", True)
        self.disable_default = _env_flag("TERMCONFIRM_DISABLE_DEFAULT", False)

    def validate(self) -> list[str]:
        """Validate configuration values."""
        errors = []

        if self.theme not in THEMES:
            errors.append(
                f"TERMCONFIRM_THEME must be one of {', '.join(sorted(THEMES))} (got '{self.theme}')"
            )

        return errors

    def build_confirm(self, prompt: str = "") -> Confirm:
        """Create a confirm prompt using these settings."""
        return (
            Confirm.with_theme(get_theme(self.theme))
            .with_prompt(prompt)
            .show_default(self.show_default)
            .disable_default(self.disable_default)
            .wait_for_newline(self.wait_for_newline)
        )
