"""
Root command execution.

``execute`` runs a Click command (or Typer application) configured by a list of
parameters and returns the exit code the process should use::

    def main() -> None:
        sys.exit(execute(app, configure_cmd_param(silence_errors_configurer)))
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, List, NoReturn, Optional, Protocol, Sequence, Union

import click
import typer

from .commands import (
    as_click_command,
    click_namespace,
    flag_error_func_for,
    is_exit,
    is_flag_error,
    silences_errors,
    silences_usage,
)
from .handlers import ErrorHandler, error_message
from .mappers import DEFAULT_EXIT_CODE, ExitCodeExtractor

logger = logging.getLogger(__name__)

__all__ = [
    "Executor",
    "Param",
    "configure_cmd_param",
    "error_handler_param",
    "exit_code_extractor_param",
    "execute",
    "run_and_exit",
]

CommandConfigurer = Callable[[click.Command], None]


@dataclass
class Executor:
    """
    Configuration collected from the parameters of a single ``execute`` call.
    """
    configure_cmds: List[CommandConfigurer] = field(default_factory=list)
    error_handler: Optional[ErrorHandler] = None
    exit_code_extractor: Optional[ExitCodeExtractor] = None


class Param(Protocol):
    """A parameter of ``execute``; mutates the executor it is applied to."""

    def apply(self, executor: Executor) -> None:
        ...


@dataclass(frozen=True)
class _ConfigureCmdParam:
    configure_cmd: CommandConfigurer

    def apply(self, executor: Executor) -> None:
        executor.configure_cmds.append(self.configure_cmd)


@dataclass(frozen=True)
class _ErrorHandlerParam:
    handler: ErrorHandler

    def apply(self, executor: Executor) -> None:
        executor.error_handler = self.handler


@dataclass(frozen=True)
class _ExitCodeExtractorParam:
    extractor: ExitCodeExtractor

    def apply(self, executor: Executor) -> None:
        executor.exit_code_extractor = self.extractor


def configure_cmd_param(configure_cmd: CommandConfigurer) -> Param:
    """
    Add a configuration function for the root command.

    All configuration functions run on the root command, in the order they
    were added, before it is executed.
    """
    return _ConfigureCmdParam(configure_cmd)


def error_handler_param(handler: ErrorHandler) -> Param:
    """
    Set the error handler. If the root command fails, the handler is called
    with the root command and the error. A later handler replaces an earlier one.
    """
    return _ErrorHandlerParam(handler)


def exit_code_extractor_param(extractor: ExitCodeExtractor) -> Param:
    """
    Set the exit code extractor. If the root command fails, the value the
    extractor returns for the error is used as the exit code. A later extractor
    replaces an earlier one.
    """
    return _ExitCodeExtractorParam(extractor)


def _build_executor(params: Sequence[Optional[Param]]) -> Executor:
    executor = Executor()
    for param in params:
        if param is None:
            continue
        param.apply(executor)
    return executor


def _run(command: click.Command, args: List[str], prog_name: str) -> Optional[BaseException]:
    """
    Invoke ``command`` once; return the error it failed with, if any.

    ``Exit`` with code 0, a group shown its help because it got no arguments,
    and ``SystemExit`` with no code or code 0 are successes. ``SystemExit``
    with an integer code is turned into ``Exit``.
    """
    ns = click_namespace(command)
    no_args_is_help = getattr(ns.exceptions, "NoArgsIsHelpError", None)
    try:
        try:
            with command.make_context(prog_name, args) as ctx:
                command.invoke(ctx)
        except (EOFError, KeyboardInterrupt) as e:
            raise ns.Abort() from e
    except SystemExit as e:
        if e.code is None or e.code == 0:
            return None
        if isinstance(e.code, int):
            return ns.exceptions.Exit(e.code)
        return e
    except Exception as e:
        if is_exit(e):
            return None if e.exit_code == 0 else e
        if no_args_is_help is not None and isinstance(e, no_args_is_help):
            e.show()
            return None
        return e
    return None


def _apply_flag_error_func(root: click.Command, err: BaseException) -> BaseException:
    if not is_flag_error(err):
        return err
    ctx = err.ctx
    func = flag_error_func_for(ctx, root)
    if func is None or ctx is None:
        return err
    return func(ctx, err)


def _print_default(root: click.Command, err: BaseException) -> None:
    """Report ``err`` the way the framework does unless silenced."""
    ctx = getattr(err, "ctx", None)
    failing = ctx.command if ctx is not None else None

    show_usage = isinstance(err, click_namespace(err).UsageError) and ctx is not None
    if show_usage and not (silences_usage(root) or silences_usage(failing)):
        typer.echo(ctx.get_usage(), err=True)

    if silences_errors(root) or silences_errors(failing):
        return
    message = error_message(err)
    if message:
        typer.echo(f"Error: {message}", err=True)


def execute(
    root: Union[click.Command, typer.Typer],
    *params: Optional[Param],
    args: Optional[Sequence[str]] = None,
    prog_name: Optional[str] = None,
) -> int:
    """
    Execute ``root`` configured with ``params`` and return the exit code.

    Args:
        root: Root Click command or Typer application
        *params: Parameters built by the ``*_param`` constructors; ``None``
            entries are ignored
        args: Arguments to parse, ``sys.argv[1:]`` by default
        prog_name: Program name shown in usage, derived from ``sys.argv[0]``
            by default

    Returns:
        0 on success. On failure, the exit code extractor's result if one is
        registered, otherwise 1.
    """
    command = as_click_command(root)
    executor = _build_executor(params)

    logger.debug(f"Applying {len(executor.configure_cmds)} configurers to {command.name!r}")
    for configure_cmd in executor.configure_cmds:
        configure_cmd(command)

    if args is None:
        args = sys.argv[1:]
    if prog_name is None:
        prog_name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else command.name

    err = _run(command, list(args), prog_name)
    if err is None:
        return 0

    err = _apply_flag_error_func(command, err)
    logger.debug(f"Command {prog_name!r} failed: {type(err).__name__}: {err}")
    _print_default(command, err)

    if executor.error_handler is not None:
        executor.error_handler(command, err)

    if executor.exit_code_extractor is not None:
        return executor.exit_code_extractor(err)

    return DEFAULT_EXIT_CODE


def run_and_exit(
    root: Union[click.Command, typer.Typer],
    *params: Optional[Param],
    args: Optional[Sequence[str]] = None,
    prog_name: Optional[str] = None,
) -> NoReturn:
    """
    Execute ``root`` and exit the process with the resulting code.

    Raises:
        SystemExit: Always, carrying the exit code from ``execute``
    """
    raise SystemExit(execute(root, *params, args=args, prog_name=prog_name))
