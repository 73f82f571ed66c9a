"""
Errors raised by cliexec configurers.
"""
from __future__ import annotations

from typing import Optional

import click

__all__ = ["FlagUsageError"]


class FlagUsageError(click.UsageError):
    """
    Flag-parsing error whose message has the command usage appended.

    Produced by ``flag_errors_usage_error_configurer``. The original Click
    error is kept as ``__cause__``.
    """

    def __init__(self, message: str, ctx: Optional[click.Context] = None) -> None:
        super().__init__(message, ctx=ctx)
