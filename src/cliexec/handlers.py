"""
Error handlers.

Handlers report a failed command, typically by printing. They are installed
with ``error_handler_param`` and run before the exit code is computed.
"""
from __future__ import annotations

import traceback
from typing import Callable, Optional, Union

import click
import typer

from .commands import click_namespace, is_exit

__all__ = ["ErrorHandler", "error_message", "error_printer_with_debug_handler", "format_traceback"]

ErrorHandler = Callable[[click.Command, BaseException], None]


def error_message(err: BaseException) -> str:
    """
    Message to show for ``err``.

    Click exceptions use ``format_message``. ``click.exceptions.Exit`` carries
    only a code and has no message.
    """
    if is_exit(err):
        return ""
    if isinstance(err, click_namespace(err).ClickException):
        return err.format_message()
    return str(err)


def error_printer_with_debug_handler(
    debug: Union[bool, Callable[[], bool], None] = None,
    debug_err_transform: Optional[Callable[[BaseException], str]] = None,
) -> ErrorHandler:
    """
    Build a handler that prints ``Error: <message>`` to stderr.

    Nothing is printed when the message is empty. If ``debug`` is set and
    ``debug_err_transform`` is given, the transform's output replaces the
    message. Click commands have no output stream of their own, so the
    message goes to stderr, where Click reports errors.

    Args:
        debug: Debug switch. A callable is evaluated each time the handler
            runs, so values set while parsing flags are seen.
        debug_err_transform: Renders an error for debug output

    Returns:
        Handler taking ``(command, error)``
    """
    def handler(command: click.Command, err: BaseException) -> None:
        message = error_message(err)
        if message == "":
            return
        enabled = debug() if callable(debug) else bool(debug)
        if enabled and debug_err_transform is not None:
            message = debug_err_transform(err)
        typer.echo(f"Error: {message}", err=True)

    return handler


def format_traceback(err: BaseException, limit: Optional[int] = None) -> str:
    """
    Render ``err`` with its traceback and chained causes.

    Intended as a ``debug_err_transform``.
    """
    rendered = "".join(traceback.format_exception(type(err), err, err.__traceback__, limit=limit))
    return f"{error_message(err)}\n{rendered.rstrip()}"
