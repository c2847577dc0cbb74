import logging

import click
import typer
from rich.console import Console
from rich.table import Table

from .exceptions import PromptFailed

logger = logging.getLogger(__name__)


class ConsoleSelector:
    """Numbered single-choice prompt on the terminal."""

    def __init__(self, console: Console = None):
        self.console = console or Console(stderr=True)

    def select(self, prompt, candidates):
        table = Table(title=prompt, show_header=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column(prompt)
        for index, candidate in enumerate(candidates, 1):
            table.add_row(str(index), str(candidate))
        try:
            self.console.print(table)
            choice = typer.prompt(
                f"Select {prompt.lower()}",
                type=click.IntRange(1, len(candidates)),
                default=1,
                err=True,
            )
        except (click.Abort, EOFError) as e:
            raise PromptFailed(
                f"Unable to render {prompt.lower()} selector", stage=prompt, cause=e
            ) from e
        return candidates[choice - 1]


def choose(selector, prompt, candidates):
    """Pre-select the only candidate, otherwise delegate to the selector."""
    if len(candidates) == 1:
        logger.info(f"Pre-selecting the only {prompt.lower()} available")
        return candidates[0]
    return selector.select(prompt, candidates)
