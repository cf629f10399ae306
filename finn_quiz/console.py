import sys
from typing import Callable

import click

Ask = Callable[[str], str]
Say = Callable[[str], None]


def prompt_answer(text: str) -> str:
    """Read one answer line from stdin. End of input counts as an empty answer."""
    click.echo(text, nl=False)
    line = sys.stdin.readline()
    if not line:
        click.echo("")
    return line.rstrip("\r\n")


def echo(msg: str = "") -> None:
    click.echo(msg)
