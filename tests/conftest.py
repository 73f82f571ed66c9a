"""Root pytest configuration for cliexec tests."""
import click
import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CLIEXEC_* variables from the outer environment out of tests."""
    monkeypatch.delenv("CLIEXEC_DEBUG", raising=False)
    monkeypatch.delenv("CLIEXEC_TRACEBACK_LIMIT", raising=False)


@pytest.fixture
def ok_command():
    """Command that always succeeds."""
    return click.Command("app", callback=lambda: None)


@pytest.fixture
def boom_command():
    """Command that always fails with RuntimeError("boom")."""
    def fail():
        raise RuntimeError("boom")
    return click.Command("app", callback=fail)


@pytest.fixture
def group():
    """Group with a ``greet`` subcommand taking a ``--name`` option."""
    @click.group("app")
    def app():
        pass

    @app.command()
    @click.option("--name", default="world")
    def greet(name):
        click.echo(f"hello {name}")

    return app
