"""
Tests for ExecContext and its conventional parameter set.
"""
from __future__ import annotations

import click
import typer

from cliexec.cli_context import ExecContext
from cliexec.commands import click_namespace
from cliexec.executor import Executor, execute
from cliexec.mappers import exit_code_for
from cliexec.settings import Settings


def _debug_app(exec_ctx):
    app = typer.Typer()

    @app.callback()
    def main(debug: bool = typer.Option(False, "--debug")):
        if debug:
            exec_ctx.debug = True

    @app.command()
    def fail():
        raise RuntimeError("boom")

    @app.command()
    def ok():
        typer.echo("done")

    @app.command()
    def leave():
        raise typer.Exit()

    return app


class TestExecContext:
    """Test context construction and parameter presets."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CLIEXEC_DEBUG", "true")
        monkeypatch.setenv("CLIEXEC_TRACEBACK_LIMIT", "2")

        exec_ctx = ExecContext.from_env()

        assert exec_ctx.settings == Settings(debug=True, traceback_limit=2)
        assert exec_ctx.is_debug()

    def test_params_populate_executor(self):
        executor = Executor()
        for param in ExecContext(Settings()).params():
            param.apply(executor)

        assert len(executor.configure_cmds) == 3
        assert executor.error_handler is not None
        assert executor.exit_code_extractor is exit_code_for

    def test_params_without_extractor(self):
        executor = Executor()
        for param in ExecContext(Settings()).params(exit_code_extractor=None):
            param.apply(executor)

        assert executor.exit_code_extractor is None


class TestExecContextExecution:
    """Run commands with the conventional parameters."""

    def test_failure_prints_single_error_line(self, boom_command, capsys):
        code = execute(boom_command, *ExecContext(Settings()).params(), args=[], prog_name="app")

        assert code == 1
        assert capsys.readouterr().err == "Error: boom\n"

    def test_debug_settings_print_traceback(self, boom_command, capsys):
        code = execute(boom_command, *ExecContext(Settings(debug=True)).params(), args=[], prog_name="app")

        err = capsys.readouterr().err
        assert code == 1
        assert err.startswith("Error: boom\nTraceback (most recent call last):")
        assert err.rstrip().endswith("RuntimeError: boom")

    def test_debug_flag_enables_traceback(self, capsys):
        """Test that a --debug flag parsed during execution switches debug output on."""
        exec_ctx = ExecContext(Settings())
        app = _debug_app(exec_ctx)

        code = execute(app, *exec_ctx.params(), args=["--debug", "fail"], prog_name="app")

        assert code == 1
        assert "Traceback (most recent call last):" in capsys.readouterr().err

    def test_custom_debug_transform(self, boom_command, capsys):
        exec_ctx = ExecContext(Settings(debug=True))

        execute(boom_command, *exec_ctx.params(lambda e: f"DEBUG: {e}"), args=[], prog_name="app")

        assert capsys.readouterr().err == "Error: DEBUG: boom\n"

    def test_flag_error_exit_code_and_usage(self, capsys):
        exec_ctx = ExecContext(Settings())
        app = _debug_app(exec_ctx)

        code = execute(app, *exec_ctx.params(), args=["ok", "--foo"], prog_name="app")

        err = capsys.readouterr().err
        assert code == 2
        no_such_foo = click_namespace(typer.main.get_command(app)).NoSuchOption("--foo").format_message()
        assert err.startswith(f"Error: {no_such_foo}\nUsage: app ok")

    def test_help_subcommand_removed(self, capsys):
        exec_ctx = ExecContext(Settings())
        app = _debug_app(exec_ctx)

        code = execute(app, *exec_ctx.params(), args=["help"], prog_name="app")

        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == ""
        assert captured.err == ""

    def test_success(self, capsys):
        exec_ctx = ExecContext(Settings())

        code = execute(_debug_app(exec_ctx), *exec_ctx.params(), args=["ok"], prog_name="app")

        assert code == 0
        assert capsys.readouterr().out == "done\n"

    def test_plain_click_group(self, group, capsys):
        code = execute(group, *ExecContext(Settings()).params(), args=["greet"], prog_name="app")

        assert code == 0
        assert capsys.readouterr().out == "hello world\n"
        assert isinstance(group.commands["help"], click.Command)

    def test_typer_exit_zero_is_success(self, capsys):
        exec_ctx = ExecContext(Settings())

        code = execute(_debug_app(exec_ctx), *exec_ctx.params(), args=["leave"], prog_name="app")

        assert code == 0
        assert capsys.readouterr().err == ""

    def test_typer_help_option_is_success(self, capsys):
        exec_ctx = ExecContext(Settings())

        code = execute(_debug_app(exec_ctx), *exec_ctx.params(), args=["--help"], prog_name="app")

        assert code == 0
        assert "Usage: app" in capsys.readouterr().out

    def test_group_without_arguments_shows_help(self, group, capsys):
        code = execute(group, *ExecContext(Settings()).params(), args=[], prog_name="app")

        captured = capsys.readouterr()
        output = captured.out + captured.err
        assert code == 0
        assert "Usage: app" in output
        assert "Error:" not in output
