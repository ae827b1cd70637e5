#!/usr/bin/env python3
import logging

import click

from sleeper.countdown import CancelFlag, Countdown, Outcome
from sleeper.duration import resolve_seconds
from sleeper.errors import DurationError, SleeperError
from sleeper.log import configure_logging
from sleeper.suspend import get_suspender
from sleeper.terminal import TerminalRenderer

logger = logging.getLogger("sleep_cli")

NON_NEGATIVE = click.IntRange(min=0)


def wait(total_seconds):
    """Run the countdown with the interrupt signals routed to a cancel flag."""
    cancel_flag = CancelFlag()
    cancel_flag.install()
    try:
        return Countdown(total_seconds, cancel_flag, TerminalRenderer()).run()
    finally:
        cancel_flag.restore()


@click.command(add_help_option=False)
@click.option("-s", "seconds", type=NON_NEGATIVE, default=0)
@click.option("-m", "minutes", type=NON_NEGATIVE, default=0)
@click.option("-h", "hours", type=NON_NEGATIVE, default=0)
@click.option("-d", "days", type=NON_NEGATIVE, default=0)
def cli(seconds, minutes, hours, days):
    """Suspend the computer after the given delay."""
    try:
        total_seconds = resolve_seconds(seconds, minutes, hours, days)
    except DurationError as e:
        raise click.UsageError(str(e))

    try:
        outcome = wait(total_seconds)
        if outcome is Outcome.TERMINATED:
            click.echo("\nSleep timeout was canceled.")
            return
        click.echo()
        get_suspender().suspend()
    except SleeperError as e:
        logger.info(f"Aborting: {e}")
        raise click.ClickException(str(e))


def main():
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
