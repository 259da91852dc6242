"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from pillcolor import __version__
from pillcolor.models import DEFAULT_CONFIG_PATH

from .commands import classify_command, config_group, hsv, labels, name_colors

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "pillcolor"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit file logging uses the requested level
    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "pillcolor-debug.log"
    else:
        log_path = log_file

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_path:
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    # Replace handlers from a previous invocation in the same process
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in package_logger.handlers[:]:
        package_logger.removeHandler(old)
        old.close()
    package_logger.setLevel(level)
    package_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, "
                f"file={log_path or '<stderr>'}")


@click.group()
@click.version_option(version=__version__, prog_name="pillcolor")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    envvar='PILLCOLOR_CONFIG',
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Config file to use (env: PILLCOLOR_CONFIG)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./pillcolor-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Pill Color - name the dominant color of a pill photo sample.

    Samples are hex colors such as C2894E or '#C2894E'. Each one is
    decomposed into hue/saturation/value and classified as White, Black,
    Gray or a hue name (Red, Orange, Yellow, Green, Blue, Purple, Pink),
    optionally prefixed with Light or Dark.

    \b
    Examples:
      pillcolor name C2894E
      pillcolor name FFFFFF 808080 000000 --hsv
      pillcolor hsv '#C2894E'
      pillcolor classify 200 15 85
      pillcolor config set thresholds.white_value 85
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    logger.debug(f"Using config {config_path}")


cli.add_command(name_colors)
cli.add_command(hsv)
cli.add_command(classify_command)
cli.add_command(labels)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
