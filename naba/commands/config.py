"""``naba config`` subcommands."""

import click

from naba.commands.common import CommandError, RunContext, pass_run
from naba.config import VALID_KEYS, load_config_file, save_config_file
from naba.errors import ConfigError, ExitCode


def _valid_keys() -> str:
    return ", ".join(VALID_KEYS)


@click.group(name="config")
def config_group():
    """Manage configuration (stored in $NABA_CONFIG_DIR/config.yaml, default ~/.config/naba)."""


@config_group.command(name="get")
@click.argument("key")
@pass_run
def config_get(run: RunContext, key: str):
    """Print the value of KEY."""
    try:
        config = load_config_file(run.settings)
    except ConfigError as e:
        raise CommandError(str(e), ExitCode.GENERAL) from e

    value = config.get(key)
    if not value:
        raise CommandError(f'key "{key}" is not set\n\nValid keys: {_valid_keys()}', ExitCode.GENERAL)
    click.echo(value)


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@pass_run
def config_set(run: RunContext, key: str, value: str):
    """Set KEY to VALUE."""
    try:
        config = load_config_file(run.settings)
    except ConfigError as e:
        raise CommandError(str(e), ExitCode.GENERAL) from e

    if not config.set(key, value):
        raise CommandError(f'unknown key "{key}"\n\nValid keys: {_valid_keys()}', ExitCode.USAGE)

    try:
        save_config_file(config, run.settings)
    except OSError as e:
        raise CommandError(f"save config: {e}", ExitCode.FILE_IO) from e

    if not run.options.quiet:
        click.echo(f"Set {key} = {value}")
