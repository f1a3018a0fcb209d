"""Main CLI entry point for envswitch.

This module provides the command-line interface for envswitch. It switches a
project's active ``.env`` file between the environment files stored in
``.vscode/config-center/`` and shows which environment is active.

The CLI is built using Click. The commands are thin adapters: the workflow
itself lives in ``envswitch.environments.switcher``.
"""

from typing import TYPE_CHECKING, Optional, Tuple

import click

from envswitch import __version__
from envswitch.utils.errors import ErrorHandler
from envswitch.utils.logging import setup_logging

if TYPE_CHECKING:
    from envswitch.environments.switcher import EnvironmentSwitcher


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--log-file", help="Log to file in addition to console")
@click.option(
    "--project",
    "-p",
    envvar="ENVSWITCH_PROJECT",
    type=click.Path(file_okay=False),
    help="Project folder (default: nearest folder with .vscode or .git)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_file: Optional[str], project: Optional[str]) -> None:
    """envswitch - Switch the active .env between environment files.

    Environment files live in .vscode/config-center/ and are named
    .env.<name>. Switching copies the chosen file over the project's .env.

    Args:
        ctx: Click context object containing shared state
        verbose: Enable verbose output for detailed logging
        log_file: Optional path to log file for additional logging
        project: Optional project folder
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["log_file"] = log_file
    ctx.obj["project"] = project
    ctx.obj["error_handler"] = ErrorHandler(verbose=verbose)

    setup_logging(verbose=verbose, log_file=log_file)


def _find_project_root(ctx: click.Context) -> Optional[str]:
    from envswitch.environments.detector import ProjectDetector

    return ProjectDetector().find_project_root(ctx.obj["project"])


def _create_switcher(ctx: click.Context) -> Tuple["EnvironmentSwitcher", Optional[str]]:
    """Build a switcher wired to the console for the detected project."""
    from envswitch.config import SettingsManager
    from envswitch.environments.switcher import EnvironmentSwitcher
    from envswitch.host import ConsoleHost

    project_root = _find_project_root(ctx)

    try:
        settings = SettingsManager(project_root).load_settings()
    except Exception as e:
        ctx.obj["error_handler"].exit_with_error(e, "Loading settings")

    return EnvironmentSwitcher(ConsoleHost(), settings=settings), project_root


@cli.command()
@click.argument("name", required=False)
@click.pass_context
def switch(ctx: click.Context, name: Optional[str]) -> None:
    """Switch the active environment.

    Without NAME, lists the environment files and asks which one to
    activate. NAME may be a file name (.env.prod) or just its suffix (prod).

    Args:
        ctx: Click context object
        name: Environment to activate without prompting
    """
    switcher, project_root = _create_switcher(ctx)

    try:
        if name:
            result = switcher.switch_to(project_root, name)
        else:
            result = switcher.switch_environment(project_root)
    finally:
        switcher.dispose()

    if not result.ok:
        ctx.exit(1)


@cli.command("list")
@click.pass_context
def list_environments(ctx: click.Context) -> None:
    """List the environment files of the project."""
    from envswitch.environments.switcher import (
        MSG_NO_CANDIDATES,
        config_dir_for,
        list_candidates,
        no_candidates_suggestions,
        no_project_error,
        suffix_of,
    )

    project_root = _find_project_root(ctx)
    if not project_root:
        ctx.obj["error_handler"].exit_with_error(no_project_error())

    try:
        candidates = list_candidates(config_dir_for(project_root))
    except Exception as e:
        ctx.obj["error_handler"].exit_with_error(e, "Listing environment files")

    if not candidates:
        click.echo(MSG_NO_CANDIDATES)
        for suggestion in no_candidates_suggestions(project_root):
            click.echo(f"  • {suggestion}")
        return

    width = max(len(suffix_of(name)) for name in candidates)
    click.echo(f"Environments in {config_dir_for(project_root)}:")
    for name in candidates:
        click.echo(f"  {suffix_of(name).ljust(width)}  {name}")


@cli.command()
@click.pass_context
def session(ctx: click.Context) -> None:
    """Switch environments repeatedly in one session.

    The status indicator stays up between switches and is torn down when
    the session ends.
    """
    from envswitch.environments.switcher import SwitchOutcome

    switcher, project_root = _create_switcher(ctx)

    try:
        while True:
            result = switcher.switch_environment(project_root)
            if result.outcome in (SwitchOutcome.NO_PROJECT, SwitchOutcome.NO_CANDIDATES):
                break

            try:
                again = click.confirm("Switch again?", default=False)
            except click.Abort:
                break
            if not again:
                break
    finally:
        switcher.dispose()

    click.echo("Session ended")
    if not result.ok:
        ctx.exit(1)
