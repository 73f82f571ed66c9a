"""
cliexec - run Click and Typer root commands and map failures to exit codes.
"""
from .cli_context import ExecContext
from .configurers import (
    flag_error_with_usage,
    flag_errors_usage_error_configurer,
    remove_help_command_configurer,
    silence_errors_configurer,
)
from .errors import FlagUsageError
from .executor import (
    Executor,
    Param,
    configure_cmd_param,
    error_handler_param,
    execute,
    exit_code_extractor_param,
    run_and_exit,
)
from .handlers import error_printer_with_debug_handler, format_traceback
from .mappers import DEFAULT_EXIT_CODE, exit_code_for, exit_codes_by_name
from .settings import Settings, create_settings_from_env

__all__ = [
    "DEFAULT_EXIT_CODE",
    "ExecContext",
    "Executor",
    "FlagUsageError",
    "Param",
    "Settings",
    "configure_cmd_param",
    "create_settings_from_env",
    "error_handler_param",
    "error_printer_with_debug_handler",
    "execute",
    "exit_code_extractor_param",
    "exit_code_for",
    "exit_codes_by_name",
    "flag_error_with_usage",
    "flag_errors_usage_error_configurer",
    "format_traceback",
    "remove_help_command_configurer",
    "run_and_exit",
    "silence_errors_configurer",
]
