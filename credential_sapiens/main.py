"""CLI entry point for the git credential helper.

Git runs the helper as ``git-credential-sapiens <action>`` with the action
being ``get``, ``store`` or ``erase``, and talks to it over stdin/stdout.

Configure git to use it with::

    $ git config --global credential.helper sapiens
"""

import asyncio
import sys
from pathlib import Path

import click
import structlog
from pydantic import ValidationError

from credential_sapiens import __version__
from credential_sapiens.commands import CommandContext, create_commands, select_command
from credential_sapiens.config.settings import HelperSettings
from credential_sapiens.credentials.factory import create_credential_store
from credential_sapiens.enums import StoreType
from credential_sapiens.exceptions import ConfigurationError, CredentialError, CredentialHelperError
from credential_sapiens.hosts.factory import create_registry
from credential_sapiens.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--config",
    envvar="SAPIENS_CREDENTIAL_CONFIG",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to YAML configuration file",
)
@click.option(
    "--store",
    type=click.Choice([s.value for s in StoreType]),
    default=None,
    help="Credential store backend (overrides configuration)",
)
@click.option("--log-level", default=None, help="Logging level (overrides configuration)")
@click.version_option(version=__version__, prog_name="git-credential-sapiens")
@click.argument("args", nargs=-1)
def cli(config: Path | None, store: str | None, log_level: str | None, args: tuple[str, ...]) -> None:
    """Git credential helper backed by the OS keyring or an encrypted file.

    ARGS starts with the action git requests: get, store or erase.
    """
    configure_logging(log_level or "WARNING")
    tokens = list(args)

    try:
        settings = _load_settings(config, store, log_level)
        configure_logging(settings.log_level)

        command = select_command(create_commands(create_registry(settings)), tokens)
        context = CommandContext(
            credential_store=create_credential_store(settings),
            stdin=sys.stdin,
            stdout=sys.stdout,
            settings=settings,
        )

        asyncio.run(command.execute(context, tokens))

    except CredentialError as e:
        click.echo(f"Error: {e.message}", err=True)
        if e.suggestion:
            click.echo(f"Suggestion: {e.suggestion}", err=True)
        log.debug("credential_error", exc_info=True)
        sys.exit(1)
    except CredentialHelperError as e:
        click.echo(f"Error: {e.message}", err=True)
        log.debug("helper_error", exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)


def _load_settings(config: Path | None, store: str | None, log_level: str | None) -> HelperSettings:
    """Load settings from file or environment and apply CLI overrides.

    Raises:
        ConfigurationError: If any source holds an invalid value
    """
    if config:
        settings = HelperSettings.from_yaml(config)
    else:
        try:
            settings = HelperSettings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in environment: {e}") from e

    overrides: dict[str, object] = {}
    if store:
        overrides["store"] = store
    if log_level:
        overrides["log_level"] = log_level

    if not overrides:
        return settings

    try:
        return HelperSettings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid command-line option: {e}") from e


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
