"""Themes for rendering the confirmation prompt."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from rich.color import ColorSystem
from rich.style import Style


class Theme(ABC):
    """Abstract base class for prompt themes.

    A theme only decides how the prompt and the final selection look. It
    never writes to the terminal itself; that is the job of
    TermThemeRenderer.
    """

    @abstractmethod
    def format_confirm_prompt(self, prompt: str, default: Optional[bool]) -> str:
        """Format the question line.

        Args:
            prompt: Question text shown to the user
            default: Default answer to indicate, or None to hide it

        Returns:
            Prompt string without a trailing newline
        """
        pass

    @abstractmethod
    def format_confirm_prompt_selection(self, prompt: str, selection: bool) -> str:
        """Format the line shown once the user has answered.

        Args:
            prompt: Question text shown to the user
            selection: The resolved answer

        Returns:
            Selection string without a trailing newline
        """
        pass


class SimpleTheme(Theme):
    """Plain text theme without colors."""

    def format_confirm_prompt(self, prompt: str, default: Optional[bool]) -> str:
        if default is None:
            hint = "[y/n]"
        elif default:
            hint = "[Y/n]"
        else:
            hint = "[y/N]"

        if prompt:
            return f"{prompt} {hint} "
        return f"{hint} "

    def format_confirm_prompt_selection(self, prompt: str, selection: bool) -> str:
        answer = "yes" if selection else "no"
        if prompt:
            return f"{prompt} {answer}"
        return answer


class ColorfulTheme(Theme):
    """Decorated theme with colored prefixes and answers.

    Styles are rich Style objects rendered to ANSI escapes for the given
    color system. Passing color_system=None renders plain text.
    """

    def __init__(
        self,
        color_system: Optional[ColorSystem] = ColorSystem.STANDARD,
        prompt_prefix: str = "?",
        prompt_suffix: str = "›",
        success_prefix: str = "✔",
        success_suffix: str = "·",
    ):
        self.color_system = color_system
        self.prompt_prefix = prompt_prefix
        self.prompt_suffix = prompt_suffix
        self.success_prefix = success_prefix
        self.success_suffix = success_suffix

        self.prompt_prefix_style = Style(color="yellow", bold=True)
        self.prompt_suffix_style = Style(color="bright_black", bold=True)
        self.success_prefix_style = Style(color="green", bold=True)
        self.success_suffix_style = Style(color="bright_black", bold=True)
        self.prompt_style = Style(bold=True)
        self.hint_style = Style(color="bright_black")
        self.defaults_style = Style(color="cyan")
        self.values_style = Style(color="green")

    def _apply(self, style: Style, text: str) -> str:
        if self.color_system is None:
            return text
        return style.render(text, color_system=self.color_system)

    def _prefixed(self, prefix: str, prefix_style: Style, prompt: str) -> str:
        parts = [self._apply(prefix_style, prefix)]
        if prompt:
            parts.append(self._apply(self.prompt_style, prompt))
        return " ".join(parts)

    def format_confirm_prompt(self, prompt: str, default: Optional[bool]) -> str:
        head = self._prefixed(self.prompt_prefix, self.prompt_prefix_style, prompt)
        hint = self._apply(self.hint_style, "(y/n)")
        suffix = self._apply(self.prompt_suffix_style, self.prompt_suffix)

        if default is None:
            return f"{head} {hint} {suffix} "

        default_text = self._apply(self.defaults_style, "yes" if default else "no")
        return f"{head} {hint} {suffix} {default_text}"

    def format_confirm_prompt_selection(self, prompt: str, selection: bool) -> str:
        head = self._prefixed(self.success_prefix, self.success_prefix_style, prompt)
        suffix = self._apply(self.success_suffix_style, self.success_suffix)
        answer = self._apply(self.values_style, "yes" if selection else "no")
        return f"{head} {suffix} {answer}"


THEMES: Dict[str, type] = {
    "simple": SimpleTheme,
    "colorful": ColorfulTheme,
}


def get_theme(name: str) -> Theme:
    """Instantiate a theme by name.

    Raises:
        ValueError: If no theme is registered under that name
    """
    theme_class = THEMES.get(name.lower())
    if not theme_class:
        raise ValueError(f"Unknown theme '{name}'. Available: {sorted(THEMES)}")
    return theme_class()


class TermThemeRenderer:
    """Draws theme output onto a terminal.

    Cursor visibility and line clearing stay with the caller.
    """

    def __init__(self, term, theme: Theme):
        self.term = term
        self.theme = theme

    def render_prompt(self, text: str, default: Optional[bool]) -> None:
        """Write the question, leaving the cursor on the same line."""
        self.term.write_str(self.theme.format_confirm_prompt(text, default))

    def render_confirmed(self, text: str, outcome: bool) -> None:
        """Write the final selection as a complete line."""
        self.term.write_line(self.theme.format_confirm_prompt_selection(text, outcome))
