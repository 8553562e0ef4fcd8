"""CLI entry point for pi-prompt. Uses Click for argument parsing.

Lets shell scripts ask interactive questions: the prompt is drawn on the
terminal and the answer is printed to stdout.
"""

from __future__ import annotations

import sys

import click

from pi.prompt.prompts import confirm, enter, pick
from pi.prompt.prompts.pick import DEFAULT_SELECTOR
from pi.prompt.terminal import ProcessTerminal, Terminal


def _make_terminal() -> Terminal:
    """Draw prompts on stderr so stdout carries only the answer."""
    return ProcessTerminal(stdout=sys.stderr)


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx):
    """Interactive terminal prompts."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("enter")
@click.option("--label", default=None, help="Text shown before the input")
@click.option("--retry-message", default=None, help="Shown after invalid input")
@click.option(
    "--maximum-retries",
    type=int,
    default=-1,
    show_default=True,
    help="Retries allowed after invalid input; negative means unlimited",
)
@click.option("--non-empty", is_flag=True, help="Reject empty input")
def enter_cmd(label, retry_message, maximum_retries, non_empty):
    """Read one line of text."""
    validator = (lambda value: len(value) > 0) if non_empty else None
    value = enter(
        label=label,
        validator=validator,
        retry_message=retry_message,
        maximum_retries=maximum_retries,
        terminal=_make_terminal(),
    )
    click.echo(value)


@main.command("pick")
@click.argument("options", nargs=-1, required=True)
@click.option("--label", default=None, help="Text shown above the options")
@click.option("--selector", default=DEFAULT_SELECTOR, show_default=True)
@click.option("--limit-rows", type=int, default=None, help="Options visible at once")
@click.option("--start-at", type=int, default=None, help="Initially focused index")
def pick_cmd(options, label, selector, limit_rows, start_at):
    """Choose one of OPTIONS with the arrow keys."""
    try:
        index, option = pick(
            list(options),
            label=label,
            selector=selector,
            limit_rows=limit_rows,
            start_at_index=start_at,
            terminal=_make_terminal(),
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    click.echo(f"{index}\t{option}")


@main.command("confirm")
@click.option("--label", default=None, help="The question to confirm")
@click.option("--default/--no-default", default=True, show_default=True)
def confirm_cmd(label, default):
    """Ask a yes/no question; exit status 0 means yes."""
    if not confirm(label=label, default=default, terminal=_make_terminal()):
        sys.exit(1)


if __name__ == "__main__":
    main()
