"""
Exit code extractors.

Extractors map the error of a failed command to the process exit code and are
installed with ``exit_code_extractor_param``.
"""
from __future__ import annotations

from typing import Callable, Mapping

from .commands import click_namespace, is_exit

__all__ = ["DEFAULT_EXIT_CODE", "ExitCodeExtractor", "exit_code_for", "exit_codes_by_name"]

DEFAULT_EXIT_CODE = 1

ExitCodeExtractor = Callable[[BaseException], int]


def exit_code_for(exc: BaseException) -> int:
    """
    Map a Click failure to the exit code Click itself would use.

    - ``click.exceptions.Exit``: its ``exit_code``
    - ``click.ClickException``: its ``exit_code`` (1, or 2 for usage errors)
    - anything else, ``click.Abort`` included: 1

    Args:
        exc: Error raised by the command

    Returns:
        Exit code
    """
    if is_exit(exc) or isinstance(exc, click_namespace(exc).ClickException):
        return exc.exit_code
    return DEFAULT_EXIT_CODE


def exit_codes_by_name(codes: Mapping[str, int], fallback: int = DEFAULT_EXIT_CODE) -> ExitCodeExtractor:
    """
    Build an extractor that looks exit codes up by exception class name.

    Base classes are consulted after the class itself, so mapping
    ``"UsageError"`` also covers ``NoSuchOption``.

    Args:
        codes: Exception class name to exit code
        fallback: Code for exceptions with no mapped class

    Returns:
        Exit code extractor
    """
    table = dict(codes)

    def extractor(exc: BaseException) -> int:
        for klass in type(exc).__mro__:
            if klass.__name__ in table:
                return table[klass.__name__]
        return fallback

    return extractor
