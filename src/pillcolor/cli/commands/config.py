"""Config command implementations.

Commands:
    - config show                 # Print the effective configuration
    - config path                 # Print the config file location
    - config init                 # Create the file with defaults if missing
    - config validate             # Check the config file
    - config set KEY VALUE        # Update one field (dotted path) and save
    - config reset [--yes]        # Overwrite with defaults (keeps a .bak)
"""

import logging
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from pillcolor.cli.common import get_config_path, load_config, report_error
from pillcolor.exceptions import (
    ConfigurationError,
    ConfigValidationError,
    wrap_pydantic_error,
)
from pillcolor.models import AppConfig
from pillcolor.utils import PydanticPersistence

logger = logging.getLogger(__name__)


def _save(config: AppConfig, path: Path) -> None:
    try:
        config.save(path)
    except OSError as e:
        logger.error(f"Failed to save config to {path}: {e}")
        report_error(e)


def _apply_update(config: AppConfig, key: str, value: str, path: Path) -> AppConfig:
    """Return a validated copy of ``config`` with the dotted ``key`` set to ``value``."""
    data: dict[str, Any] = config.model_dump(mode="json")
    parts = key.split(".")

    node = data
    for part in parts[:-1]:
        if not isinstance(node.get(part), dict):
            raise ConfigValidationError(key, value, "unknown configuration field", str(path))
        node = node[part]

    leaf = parts[-1]
    if leaf not in node or isinstance(node[leaf], dict):
        raise ConfigValidationError(key, value, "unknown configuration field", str(path))
    node[leaf] = value

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise wrap_pydantic_error(e, str(path)) from e


@click.group(name="config")
def config_group():
    """Inspect and edit pillcolor settings."""
    pass


@config_group.command(name="show")
@click.pass_context
def show(ctx: click.Context):
    """Print the effective configuration as JSON."""
    config = load_config(ctx)
    click.echo(config.model_dump_json(indent=2))


@config_group.command(name="path")
@click.pass_context
def path(ctx: click.Context):
    """Print the config file location."""
    click.echo(str(get_config_path(ctx)))


@config_group.command(name="init")
@click.pass_context
def init(ctx: click.Context):
    """Create the config file with defaults if it does not exist.

    An existing file is never overwritten; if it is broken the error is
    reported and the command exits 1.
    """
    config_path = get_config_path(ctx)
    try:
        PydanticPersistence.load_json(config_path, AppConfig)
    except FileNotFoundError:
        _save(AppConfig(), config_path)
        click.echo(f"Created {config_path}")
        return
    except ConfigurationError as e:
        report_error(e)

    click.echo(f"Config already exists: {config_path}")


@config_group.command(name="validate")
@click.pass_context
def validate(ctx: click.Context):
    """Check that the config file parses and its values are valid."""
    config_path = get_config_path(ctx)
    try:
        PydanticPersistence.load_json(config_path, AppConfig)
    except FileNotFoundError:
        problem = "file not found"
    except ConfigurationError as e:
        problem = e.user_message
    else:
        click.echo(f"[OK] {config_path}")
        return

    click.echo(f"[FAIL] {config_path}: {problem}", err=True)
    ctx.exit(1)


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_value(ctx: click.Context, key: str, value: str):
    """Set one field, e.g. `pillcolor config set thresholds.white_value 85`."""
    config_path = get_config_path(ctx)
    config = load_config(ctx)

    try:
        updated = _apply_update(config, key, value, config_path)
    except ConfigurationError as e:
        report_error(e)

    _save(updated, config_path)
    logger.info(f"Config updated: {key}={value}")
    click.echo(f"{key} = {value}")


@config_group.command(name="reset")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset(ctx: click.Context, yes: bool):
    """Overwrite the config file with defaults."""
    config_path = get_config_path(ctx)
    if not yes:
        click.confirm(f"Reset {config_path} to defaults?", abort=True)

    _save(AppConfig(), config_path)
    click.echo(f"Reset {config_path} to defaults")
