"""Output helpers for the convert-agents CLI.

Diagnostics go to stderr through user_output; content meant to be piped or
captured goes to stdout through machine_output.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    click.echo(message, nl=nl)
