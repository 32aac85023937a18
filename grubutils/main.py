"""
GrubUtils — CLI entrypoint.

Usage:
    grubutils --help
    grubutils edit [--no-generate] [-f FILE] [-o OUTPUT] [-e EDITOR]
    grubutils generate [-o OUTPUT]

When not started as root, grubutils re-runs itself through sudo (with
the environment preserved) before any arguments are parsed.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import NoReturn

import click

from grubutils import __version__
from grubutils.adapters.base import Adapter
from grubutils.adapters.shell.command import ForegroundCommandAdapter
from grubutils.core.config.loader import find_config_file, load_settings
from grubutils.core.context import Host
from grubutils.core.engine.dispatcher import Dispatcher
from grubutils.core.errors import ConfigError, LaunchError
from grubutils.core.models.invocation import InvocationRequest
from grubutils.core.models.settings import Settings
from grubutils.core.observability.logging_config import (
    LOG_FILE_ENV_VAR,
    LOG_FILE_LEVEL_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    resolve_level,
    setup_logging,
)
from grubutils.core.services.privilege import check_privilege, elevate_and_reexec

logger = logging.getLogger(__name__)

_EDITOR_HELP = (
    "The editor to use. "
    + click.style(
        "WARNING: the editor you specify will be run as root, "
        "meaning it is granted full access to your system.",
        fg="red",
    )
    + " Priority for detecting editor: this option, then $EDITOR, "
    "then /usr/bin/nano."
)


def _fail(message: str) -> NoReturn:
    click.secho(message, fg="red", err=True)
    sys.exit(1)


def _load_settings(config_path: Path | None, environ: Mapping[str, str]) -> Settings:
    try:
        return load_settings(find_config_file(config_path, environ))
    except ConfigError as e:
        _fail(f"Configuration error: {e}")


@click.group()
@click.version_option(version=__version__, prog_name="grubutils")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to grubutils.yml (default: $GRUBUTILS_CONFIG, then /etc/grubutils.yml).",
)
@click.option("--dry-run", is_flag=True, help="Print the commands instead of running them.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    dry_run: bool,
) -> None:
    """GrubUtils — edit the grub defaults file and regenerate grub.cfg."""
    ctx.ensure_object(dict)
    host: Host = ctx.obj.get("host") or Host.from_system()
    adapter: Adapter = ctx.obj.get("adapter") or ForegroundCommandAdapter()

    setup_logging(
        level=resolve_level(
            debug=debug,
            verbose=verbose,
            quiet=quiet,
            env_level=host.getenv(LOG_LEVEL_ENV_VAR),
        ),
        log_file=host.getenv(LOG_FILE_ENV_VAR),
        log_file_level=host.getenv(LOG_FILE_LEVEL_ENV_VAR),
    )

    settings = _load_settings(Path(config_path) if config_path else None, host.environ)
    ctx.obj["dispatcher"] = Dispatcher(
        host=host,
        adapter=adapter,
        echo=click.echo,
        settings=settings,
        dry_run=dry_run,
    )


def _dispatch(ctx: click.Context, request: InvocationRequest) -> None:
    dispatcher: Dispatcher = ctx.obj["dispatcher"]
    try:
        dispatcher.dispatch(request)
    except LaunchError as e:
        logger.debug("Launch failed: %s", e.command)
        _fail(f"Failed to execute command: {e.reason}")


@cli.command()
@click.option("--no-generate", is_flag=True, help="Do NOT generate a grub configuration after editing.")
@click.option(
    "--file",
    "-f",
    default=None,
    help="The file to edit. Note that this does NOT affect generation. "
    "[default: /etc/default/grub]",
)
@click.option(
    "--output",
    "-o",
    default=None,
    help="The path to output the generated config to. [default: /boot/grub/grub.cfg]",
)
@click.option("--editor", "-e", default=None, help=_EDITOR_HELP)
@click.pass_context
def edit(
    ctx: click.Context,
    no_generate: bool,
    file: str | None,
    output: str | None,
    editor: str | None,
) -> None:
    """Edit the grub defaults file, then regenerate the grub configuration.

    Examples:

        grubutils edit

        grubutils edit --no-generate -e vim

        grubutils edit -f /etc/default/grub.d/custom.cfg -o /tmp/grub.cfg
    """
    _dispatch(
        ctx,
        InvocationRequest(
            command="edit",
            file=file,
            output=output,
            editor=editor,
            no_generate=no_generate,
        ),
    )


@cli.command()
@click.option(
    "--output",
    "-o",
    default=None,
    help="The path to output the generated config to. [default: /boot/grub/grub.cfg]",
)
@click.pass_context
def generate(ctx: click.Context, output: str | None) -> None:
    """Regenerate the grub configuration."""
    _dispatch(ctx, InvocationRequest(command="generate", output=output))


def main(
    argv: Sequence[str] | None = None,
    host: Host | None = None,
    adapter: Adapter | None = None,
) -> None:
    """Process entry point: privilege gate, then the click CLI.

    Always ends in SystemExit. Unprivileged runs exit with the elevated
    child's code and never reach argument parsing.
    """
    host = host or Host.from_system(argv)
    adapter = adapter or ForegroundCommandAdapter()

    setup_logging(
        level=resolve_level(env_level=host.getenv(LOG_LEVEL_ENV_VAR)),
        log_file=host.getenv(LOG_FILE_ENV_VAR),
        log_file_level=host.getenv(LOG_FILE_LEVEL_ENV_VAR),
    )

    if not check_privilege(host):
        settings = _load_settings(None, host.environ)
        click.secho(
            "Warning: GrubUtils was not run using root privileges, "
            f"attempting to use {settings.elevation_tool} to elevate privileges",
            fg="yellow",
        )
        try:
            elevate_and_reexec(host, adapter, settings.elevation_tool)
        except LaunchError as e:
            _fail(f"Failed to execute command: {e.reason}")
        except KeyboardInterrupt:
            # Ctrl-C at the sudo password prompt
            _fail("Aborted!")

    click.echo("GrubUtils is running as root")
    cli.main(
        args=host.args,
        prog_name="grubutils",
        obj={"host": host, "adapter": adapter},
    )


if __name__ == "__main__":
    main()
