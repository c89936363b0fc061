"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from launchgrid import __version__

from .commands import life, media, midi_group

logger = logging.getLogger(__name__)

# Handlers added by setup_logging, replaced when it runs again
_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)
    _installed_handlers.append(stream_handler)

    if debug and not log_file:
        log_file = Path.cwd() / "launchgrid-debug.log"

    if log_file:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="launchgrid")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./launchgrid-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Also write logs to this file'
)
def cli(verbose: int, debug: bool, log_file: Optional[Path]):
    """
    launchgrid - Game of Life and media controls on a Launchpad grid.

    \b
    Examples:
      # Play Game of Life (top row: first button starts, second quits)
      launchgrid life

      # Media panel on the side-column layout
      launchgrid media --profile mk2-side

      # List MIDI ports to find your device name
      launchgrid midi list
    """
    setup_logging(verbose, debug, log_file)


cli.add_command(life)
cli.add_command(media)
cli.add_command(midi_group)

if __name__ == "__main__":
    cli()
