"""
Execution context for CLI entry points.

Bundles settings with the conventional set of ``execute`` parameters so a
``main()`` needs only::

    run_and_exit(app, *ExecContext.from_env().params())
"""
from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, List, Optional

from .configurers import (
    flag_errors_usage_error_configurer,
    remove_help_command_configurer,
    silence_errors_configurer,
)
from .executor import Param, configure_cmd_param, error_handler_param, exit_code_extractor_param
from .handlers import error_printer_with_debug_handler, format_traceback
from .mappers import ExitCodeExtractor, exit_code_for
from .settings import Settings, create_settings_from_env


@dataclass
class ExecContext:
    """
    Shared context for executing a root command.

    Attributes:
        settings: Settings controlling debug output
        debug: Debug switch read when an error is printed; starts from
            ``settings.debug`` and may be flipped by a ``--debug`` flag callback
    """
    settings: Settings
    debug: Optional[bool] = None

    def __post_init__(self):
        if self.debug is None:
            self.debug = self.settings.debug

    @classmethod
    def from_env(cls) -> ExecContext:
        """Create a context from environment variables."""
        return cls(settings=create_settings_from_env())

    def is_debug(self) -> bool:
        return bool(self.debug)

    def params(
        self,
        debug_err_transform: Optional[Callable[[BaseException], str]] = None,
        exit_code_extractor: Optional[ExitCodeExtractor] = exit_code_for,
    ) -> List[Param]:
        """
        Conventional parameters: silenced framework output, no ``help``
        subcommand, usage appended to flag errors, ``Error: ...`` printing with
        debug detail, and Click's exit codes.

        Args:
            debug_err_transform: Debug rendering of errors; a traceback limited
                by ``settings.traceback_limit`` by default
            exit_code_extractor: Extractor to install, None for the default code

        Returns:
            Parameters for ``execute``
        """
        if debug_err_transform is None:
            debug_err_transform = functools.partial(format_traceback, limit=self.settings.traceback_limit)

        params = [
            configure_cmd_param(silence_errors_configurer),
            configure_cmd_param(remove_help_command_configurer),
            configure_cmd_param(flag_errors_usage_error_configurer),
            error_handler_param(error_printer_with_debug_handler(self.is_debug, debug_err_transform)),
        ]
        if exit_code_extractor is not None:
            params.append(exit_code_extractor_param(exit_code_extractor))
        return params
