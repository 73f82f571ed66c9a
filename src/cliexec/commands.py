"""
Adapter over the Click command objects cliexec operates on.

Click has no notion of silenced errors or a flag-error hook, so cliexec keeps
them as attributes on the command object. This module is the only place that
reads or writes them; configurers and the executor go through these helpers.

Recent Typer releases ship their own copy of Click. Commands built by Typer,
and the errors they raise, then come from that copy, so type checks go through
``click_namespace`` rather than the ``click`` module.
"""
from __future__ import annotations

import functools
import logging
import sys
from types import ModuleType
from typing import Callable, Optional, Union

import click
import typer

logger = logging.getLogger(__name__)

__all__ = [
    "HELP_COMMAND_NAME",
    "FlagErrorFunc",
    "click_namespace",
    "is_exit",
    "as_click_command",
    "set_help_command",
    "set_silence",
    "silences_errors",
    "silences_usage",
    "set_flag_error_func",
    "flag_error_func_for",
    "is_flag_error",
    "usage_string",
]

HELP_COMMAND_NAME = "help"

_SILENCE_ERRORS_ATTR = "cliexec_silence_errors"
_SILENCE_USAGE_ATTR = "cliexec_silence_usage"
_FLAG_ERROR_FUNC_ATTR = "cliexec_flag_error_func"

FlagErrorFunc = Callable[[click.Context, click.UsageError], BaseException]


@functools.lru_cache(maxsize=None)
def _namespace_for_type(klass: type) -> ModuleType:
    mro = klass.__mro__
    for base in mro:
        package = sys.modules.get(base.__module__.rpartition(".")[0])
        if package is None or not hasattr(package, "Group"):
            continue
        exceptions = getattr(package, "exceptions", None)
        markers = (
            getattr(package, "Command", None),
            getattr(package, "ClickException", None),
            getattr(package, "Abort", None),
            getattr(exceptions, "Exit", None),
        )
        if any(marker is not None and marker in mro for marker in markers):
            return package
    return click


def click_namespace(obj: object) -> ModuleType:
    """
    Return the Click package a command or error belongs to.

    This is ``click`` itself, or the copy of Click bundled with Typer for
    objects Typer built. Anything else resolves to ``click``.
    """
    return _namespace_for_type(type(obj))


def is_exit(err: BaseException) -> bool:
    """True for ``Exit`` from any Click package (``typer.Exit`` included)."""
    return isinstance(err, click_namespace(err).exceptions.Exit)


def as_click_command(root: Union[click.Command, typer.Typer]) -> click.Command:
    """
    Return the Click command behind ``root``.

    Typer applications are converted with ``typer.main.get_command``; every call
    builds a new Click command, so callers should convert once and keep it.
    """
    if isinstance(root, typer.Typer):
        command = typer.main.get_command(root)
        logger.debug(f"Converted Typer app to Click command {command.name!r}")
        return command
    if isinstance(root, click_namespace(root).Command):
        return root
    raise TypeError(f"Expected click.Command or typer.Typer, got {type(root).__name__}")


def set_help_command(command: click.Command, help_command: click.Command) -> bool:
    """
    Put ``help_command`` in the ``help`` subcommand slot of ``command``.

    Returns:
        True if the slot was set, False if ``command`` is not a group and so
        has no subcommand slot
    """
    if not isinstance(command, click_namespace(command).Group):
        return False
    command.add_command(help_command, HELP_COMMAND_NAME)
    return True


def set_silence(command: click.Command, *, errors: Optional[bool] = None,
                usage: Optional[bool] = None) -> None:
    """Set the silence-errors and/or silence-usage flags on ``command``."""
    if errors is not None:
        setattr(command, _SILENCE_ERRORS_ATTR, errors)
    if usage is not None:
        setattr(command, _SILENCE_USAGE_ATTR, usage)


def silences_errors(command: Optional[click.Command]) -> bool:
    return bool(getattr(command, _SILENCE_ERRORS_ATTR, False))


def silences_usage(command: Optional[click.Command]) -> bool:
    return bool(getattr(command, _SILENCE_USAGE_ATTR, False))


def set_flag_error_func(command: click.Command, func: FlagErrorFunc) -> None:
    """Install the flag-error transform hook on ``command``."""
    setattr(command, _FLAG_ERROR_FUNC_ATTR, func)


def flag_error_func_for(ctx: Optional[click.Context],
                        root: Optional[click.Command] = None) -> Optional[FlagErrorFunc]:
    """
    Find the flag-error transform for a failing context.

    Looks at the failing command first, then its ancestors, then ``root``.
    """
    while ctx is not None:
        func = getattr(ctx.command, _FLAG_ERROR_FUNC_ATTR, None)
        if func is not None:
            return func
        ctx = ctx.parent
    return getattr(root, _FLAG_ERROR_FUNC_ATTR, None)


def is_flag_error(error: BaseException) -> bool:
    """True for errors Click raises while parsing options."""
    ns = click_namespace(error)
    if isinstance(error, (ns.NoSuchOption, ns.BadOptionUsage)):
        return True
    return isinstance(error, ns.BadParameter) and isinstance(error.param, ns.Option)


def usage_string(ctx: click.Context) -> str:
    return ctx.get_usage()
