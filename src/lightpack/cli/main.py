"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from lightpack import __version__
from lightpack.models import DEFAULT_CONFIG_PATH

from .commands import DEVICE_COMMANDS, config
from .session import CliState, parse_led_map

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> None:
    """
    Configure logging for the command line.

    Plain invocations get a NullHandler only, so they print command output
    and error messages but no log records.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG) on stderr
        debug: If True, log DEBUG to ./lightpack-debug.log
        log_file: Custom log file path (optional)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if debug and not log_file:
        log_file = Path.cwd() / "lightpack-debug.log"

    root_logger = logging.getLogger()

    if not verbose and not log_file:
        # Stops logging's last-resort handler from writing records to stderr
        if not any(isinstance(h, logging.NullHandler) for h in root_logger.handlers):
            root_logger.addHandler(logging.NullHandler())
        return

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    root_logger.setLevel(level)

    if verbose:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 3 files, max 1MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


def _led_map_option(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_led_map(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="lightpack")
@click.option('--host', '-H', type=str, default=None, help='Prismatik server host (default: from config)')
@click.option('--port', '-p', type=int, default=None, help='Prismatik server port (default: 3636)')
@click.option(
    '--led-map',
    '-m',
    type=str,
    default=None,
    callback=_led_map_option,
    help='LED channels addressed by "color" without --led, e.g. "1,2,3" or "1-10"'
)
@click.option('--timeout', '-t', type=float, default=None, help='Socket timeout in seconds')
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Config file'
)
@click.option('-v', '--verbose', count=True, help='Increase verbosity (-v: INFO, -vv: DEBUG)')
@click.option('--debug', is_flag=True, help='Enable debug mode (logs to ./lightpack-debug.log)')
@click.option('--log-file', type=click.Path(path_type=Path), default=None, help='Custom log file path')
def cli(
    ctx,
    host: Optional[str],
    port: Optional[int],
    led_map: Optional[list[int]],
    timeout: Optional[float],
    config_path: Path,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
):
    """
    Lightpack - control a Prismatik ambient light over its text API.

    Connection settings come from the config file and can be overridden
    per invocation.

    \b
    Examples:
      lightpack status
      lightpack --host 192.168.1.20 profiles
      lightpack --led-map 1-10 color "#FF8000"
      lightpack brightness 60
      lightpack config set --host 192.168.1.20 --led-map 1-10
    """
    setup_logging(verbose, debug, log_file)

    overrides = {
        key: value
        for key, value in (("host", host), ("port", port), ("led_map", led_map), ("timeout", timeout))
        if value is not None
    }
    ctx.obj = CliState(config_path=config_path, overrides=overrides)


for _command in DEVICE_COMMANDS:
    cli.add_command(_command)
cli.add_command(config)

if __name__ == "__main__":
    cli()
