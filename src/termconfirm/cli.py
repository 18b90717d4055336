#!/usr/bin/env python3
"""CLI entry point for termconfirm."""

import logging
import sys
from typing import Optional

import click
from rich.console import Console

from .config import Config
from .term import Term
from .theme import THEMES

console = Console(stderr=True)

EXIT_YES = 0
EXIT_NO = 1
EXIT_USAGE = 2
EXIT_ABORTED = 130


@click.command(name="termconfirm")
@click.version_option(package_name="termconfirm")
@click.argument("prompt", required=False, default="")
@click.option("--default/--no-default", "default", default=True, help="Answer used when enter is pressed.")
@click.option(
    "--show-default/--hide-default",
    "show_default",
    default=None,
    help="Show or hide the default choice.",
)
@click.option(
    "--disable-default/--allow-default",
    "disable_default",
    default=None,
    help="Require an explicit y/n answer.",
)
@click.option(
    "--wait-for-newline/--immediate",
    "wait_for_newline",
    default=None,
    help="Wait for enter instead of reacting to each keystroke.",
)
@click.option("--theme", type=click.Choice(sorted(THEMES)), default=None, help="Prompt theme.")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def main(
    prompt: str,
    default: bool,
    show_default: Optional[bool],
    disable_default: Optional[bool],
    wait_for_newline: Optional[bool],
    theme: Optional[str],
    verbose: bool,
):
    """Ask a yes/no question on stderr.

    Exits 0 for yes and 1 for no, so it can guard shell commands:

        termconfirm "Delete build artifacts?" && rm -rf build
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    config = Config()

    # Flags override .env / environment settings
    if theme is not None:
        config.theme = theme
    if show_default is not None:
        config.show_default = show_default
    if disable_default is not None:
        config.disable_default = disable_default
    if wait_for_newline is not None:
        config.wait_for_newline = wait_for_newline

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]✗ {error}[/red]")
        sys.exit(EXIT_USAGE)

    confirm = config.build_confirm(prompt).default(default)

    try:
        answer = confirm.interact_on(Term.stderr())
    except (KeyboardInterrupt, EOFError):
        console.print("\n[red]✗ Aborted[/red]")
        sys.exit(EXIT_ABORTED)

    sys.exit(EXIT_YES if answer else EXIT_NO)


if __name__ == "__main__":
    main()
