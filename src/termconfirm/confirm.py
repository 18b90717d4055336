"""Yes/no confirmation prompt.

Example:
    if Confirm().with_prompt("Do you want to continue?").interact():
        print("Looks like you want to continue")
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .term import Term
from .theme import SimpleTheme, TermThemeRenderer, Theme

logger = logging.getLogger(__name__)

YES_WORDS = ("y", "yes")
NO_WORDS = ("n", "no")
YES_KEYS = ("y", "Y")
NO_KEYS = ("n", "N")
ENTER_KEYS = ("\n", "\r")


@dataclass
class ConfirmConfig:
    """Settings for a single confirmation prompt."""

    prompt_text: str = ""
    default_answer: bool = True
    show_default: bool = True
    disable_default: bool = False
    line_mode: bool = False

    @property
    def effective_default(self) -> Optional[bool]:
        """Default passed to the theme, or None when it is not shown."""
        return self.default_answer if self.show_default else None


def classify_line(line: str, default: bool, disable_default: bool = False) -> Optional[bool]:
    """Map a line of input to an answer, or None if it is not a valid answer."""
    answer = line.rstrip().lower()
    if answer in YES_WORDS:
        return True
    if answer in NO_WORDS:
        return False
    if answer == "" and not disable_default:
        return default
    return None


def classify_key(key: str, default: bool, disable_default: bool = False) -> Optional[bool]:
    """Map a single keystroke to an answer, or None if it should be ignored."""
    if key in YES_KEYS:
        return True
    if key in NO_KEYS:
        return False
    if key in ENTER_KEYS and not disable_default:
        return default
    return None


class Confirm:
    """Renders a confirm prompt and waits for a yes/no answer.

    Setters return the prompt itself so they can be chained.
    """

    def __init__(self, theme: Optional[Theme] = None):
        self.theme = theme or SimpleTheme()
        self.config = ConfirmConfig()

    @classmethod
    def with_theme(cls, theme: Theme) -> "Confirm":
        """Create a confirm prompt with a specific theme."""
        return cls(theme)

    def with_prompt(self, prompt: str) -> "Confirm":
        """Set the question text."""
        self.config.prompt_text = prompt
        return self

    def default(self, value: bool) -> "Confirm":
        """Set the answer returned when the user just presses enter.

        The default is True. Themes highlight the default choice,
        e.g. `[Y/n]` when it is True.
        """
        self.config.default_answer = value
        return self

    def show_default(self, value: bool) -> "Confirm":
        """Show or hide the default choice in the prompt."""
        self.config.show_default = value
        return self

    def disable_default(self, value: bool) -> "Confirm":
        """Require an explicit answer.

        When True, enter (or an empty line) no longer selects the default.
        """
        self.config.disable_default = value
        return self

    def wait_for_newline(self, wait: bool) -> "Confirm":
        """Set when to react to user input.

        When False (default), every keystroke is checked immediately: 'y',
        'n', or enter for the default.

        When True, the user types an answer and presses enter. Valid answers
        are "y", "yes", "n", "no", or an empty line for the default.
        """
        self.config.line_mode = wait
        return self

    def interact(self) -> bool:
        """Run the prompt on stderr and return the answer."""
        return self.interact_on(Term.stderr())

    def interact_on(self, term: Term) -> bool:
        """Run the prompt on a specific terminal and return the answer.

        Invalid input never ends the prompt. Terminal errors propagate
        unchanged.
        """
        config = self.config
        render = TermThemeRenderer(term, self.theme)
        default = config.effective_default

        render.render_prompt(config.prompt_text, default)

        term.hide_cursor()
        term.flush()

        if config.line_mode:
            rv = self._wait_for_line(term, render)
        else:
            rv = self._wait_for_key(term)

        term.clear_line()
        render.render_confirmed(config.prompt_text, rv)
        term.show_cursor()
        term.flush()

        return rv

    def _wait_for_line(self, term: Term, render: TermThemeRenderer) -> bool:
        config = self.config
        logger.debug("Waiting for a line of input")

        while True:
            rv = classify_line(term.read_line(), config.default_answer, config.disable_default)
            if rv is not None:
                return rv

            logger.debug("Invalid answer, prompting again")
            render.render_prompt(config.prompt_text, config.effective_default)
            term.flush()

    def _wait_for_key(self, term: Term) -> bool:
        config = self.config
        logger.debug("Waiting for a keystroke")

        while True:
            rv = classify_key(term.read_char(), config.default_answer, config.disable_default)
            if rv is not None:
                return rv

            logger.debug("Ignoring keystroke")
