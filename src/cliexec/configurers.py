"""
Ready-made command configurers.

Each configurer mutates a Click command in place and is meant to be passed to
``configure_cmd_param``.
"""
from __future__ import annotations

import logging

import click

from .commands import (
    HELP_COMMAND_NAME,
    click_namespace,
    set_flag_error_func,
    set_help_command,
    set_silence,
    usage_string,
)
from .errors import FlagUsageError

logger = logging.getLogger(__name__)

__all__ = [
    "remove_help_command_configurer",
    "silence_errors_configurer",
    "flag_errors_usage_error_configurer",
    "flag_error_with_usage",
]


def _hidden_help_command(command: click.Command) -> click.Command:
    return click_namespace(command).Command(
        HELP_COMMAND_NAME,
        hidden=True,
        add_help_option=False,
        context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    )


def remove_help_command_configurer(command: click.Command) -> None:
    """
    Remove the ``help`` subcommand from ``command``.

    The slot is filled with a hidden command that does nothing instead of being
    emptied, so anything that registers a default ``help`` command when the
    slot is free has nothing to fill. Commands without subcommands are left
    unchanged.
    """
    if not set_help_command(command, _hidden_help_command(command)):
        logger.debug(f"Command {command.name!r} has no subcommands, help removal skipped")


def silence_errors_configurer(command: click.Command) -> None:
    """Stop the default printing of errors and of usage on errors."""
    set_silence(command, errors=True, usage=True)


def flag_error_with_usage(ctx: click.Context, err: click.UsageError) -> FlagUsageError:
    """
    Return ``err`` with the usage string of the failing command appended.

    Args:
        ctx: Context of the command whose flags failed to parse
        err: Original flag-parsing error

    Returns:
        FlagUsageError with message ``"<err>\\n<usage>"``
    """
    usage = usage_string(ctx).removesuffix("\n")
    wrapped = FlagUsageError(f"{err.format_message()}\n{usage}", ctx=ctx)
    wrapped.__cause__ = err
    return wrapped


def flag_errors_usage_error_configurer(command: click.Command) -> None:
    """Make flag-parsing errors include the usage string of the command."""
    set_flag_error_func(command, flag_error_with_usage)
