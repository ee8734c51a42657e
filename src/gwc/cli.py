"""Command line entry point: launch the TUI or run a work commit directly."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer
from textual.logging import TextualHandler

from gwc.app import WorkCommitApp
from gwc.config import ConfigError, Settings, load_settings, save_settings
from gwc.domain.commands import build_commit_command
from gwc.git.aliases import AliasStore, AliasValidationError, AliasWriteError
from gwc.runners import CommandDispatchError, CommandRunner, DryRunRunner, ShellRunner

app = typer.Typer(
    help="Create empty work commits under a chosen Git identity alias",
    invoke_without_command=True,
)

_GITCONFIG_HELP = "Git config file holding the [alias] section (default: ~/.gitconfig)"
_REPO_HELP = "Repository to commit in (default: current directory)"
_MESSAGE_HELP = "Default commit message for this run"
_DRY_RUN_HELP = "Print the git command instead of running it"


@dataclass
class CliState:
    settings: Settings
    dry_run: bool

    def store(self) -> AliasStore:
        return AliasStore(self.settings.gitconfig_path)

    def runner(self) -> CommandRunner:
        return DryRunRunner() if self.dry_run else ShellRunner(self.settings.repository)


def configure_logging(verbose: bool) -> None:
    """Route log records through Textual so they never draw over the TUI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[TextualHandler()],
        force=True,
    )


def _load_settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    gitconfig: Path | None = typer.Option(None, "--gitconfig", help=_GITCONFIG_HELP),  # noqa: B008
    repo: Path | None = typer.Option(None, "--repo", "-C", help=_REPO_HELP),  # noqa: B008
    message: str | None = typer.Option(None, "--message", "-m", help=_MESSAGE_HELP),
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Start the interactive work-commit TUI when no command is given."""
    configure_logging(verbose)
    overrides = {
        key: value
        for key, value in {
            "gitconfig_path": gitconfig,
            "repository": repo,
            "default_commit_message": message,
        }.items()
        if value is not None
    }
    # model_copy skips validators, so rebuild to expand "~" in override paths.
    settings = Settings.model_validate({**_load_settings().model_dump(), **overrides})
    state = CliState(settings=settings, dry_run=dry_run)
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        runner = state.runner()
        WorkCommitApp(store=state.store(), runner=runner, settings=settings).run()
        if isinstance(runner, DryRunRunner):
            for command in runner.commands:
                typer.echo(command)


@app.command("aliases")
def list_aliases(ctx: typer.Context) -> None:
    """List the aliases defined in the git config."""
    state: CliState = ctx.obj
    aliases = state.store().load_aliases()
    if not aliases:
        typer.echo("No aliases defined")
        return
    width = max(len(name) for name in aliases)
    for name, definition in aliases.items():
        typer.echo(f"{name.ljust(width)}  {definition}")


@app.command("add-alias")
def add_alias(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Alias name: a letter, then letters, digits or -"),
    user_name: str = typer.Argument(..., help="user.name for commits made through the alias"),
    user_email: str = typer.Argument(..., help="user.email for commits made through the alias"),
) -> None:
    """Add an identity alias to the git config."""
    state: CliState = ctx.obj
    try:
        entry = state.store().create_alias(name, user_name, user_email)
    except (AliasValidationError, AliasWriteError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    typer.echo(f"Created alias {entry.name}: {entry.definition}")


@app.command("commit")
def commit(
    ctx: typer.Context,
    alias: str | None = typer.Option(None, "--alias", "-a", help="Alias to commit through"),
) -> None:
    """Create a work commit without prompting."""
    state: CliState = ctx.obj
    if alias is not None and alias not in state.store().load_aliases():
        typer.echo(f"Error: unknown alias '{alias}'", err=True)
        sys.exit(1)

    command = build_commit_command(state.settings.default_commit_message, alias)
    runner = state.runner()
    try:
        runner.run(command)
    except CommandDispatchError as exc:
        typer.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    typer.echo(command)


@app.command("set-message")
def set_message(
    message: str = typer.Argument(..., help="New default commit message"),
) -> None:
    """Persist a new default commit message to the settings file."""
    settings = _load_settings()
    save_settings(settings.model_copy(update={"default_commit_message": message}))
    typer.echo(f"Default commit message set to {message!r}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
