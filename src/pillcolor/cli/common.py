"""Helpers shared by CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from pillcolor.exceptions import ConfigurationError, format_error_for_display
from pillcolor.models import AppConfig

logger = logging.getLogger(__name__)


def report_error(error: Exception) -> NoReturn:
    """Print an error and its recovery hint to stderr, then exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)


def get_config_path(ctx: click.Context) -> Path:
    return ctx.find_root().obj["config_path"]


def load_config(ctx: click.Context) -> AppConfig:
    """Load the configuration selected by --config, exiting cleanly if it is broken."""
    path = get_config_path(ctx)
    try:
        return AppConfig.load_or_default(path)
    except ConfigurationError as e:
        logger.error(f"Cannot load config {path}: {e.technical_message}")
        report_error(e)
