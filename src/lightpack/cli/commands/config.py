"""
Config command: show and update ~/.lightpack/config.json.

Commands:
    - config show                                   # Display saved configuration
    - config set --host H --port P --led-map 1-10   # Update and save
"""

import click
from pydantic import ValidationError

from lightpack.exceptions import wrap_pydantic_error
from lightpack.models import ClientConfig

from ..session import get_state, parse_led_map, reports_errors


@click.group(name="config")
def config():
    """Show or change saved connection settings."""
    pass


@config.command(name="show")
@reports_errors
def show():
    """Display the saved configuration (defaults if no file exists)."""
    state = get_state()
    click.echo(f"Config file: {state.config_path}")
    click.echo(state.load_file_config().model_dump_json(indent=2))


@config.command(name="set")
@click.option("--host", type=str, default=None, help="Prismatik server host")
@click.option("--port", type=int, default=None, help="Prismatik server port")
@click.option("--led-map", type=str, default=None, help='LED channels, e.g. "1,2,3" or "1-10"')
@click.option("--timeout", type=float, default=None, help="Socket timeout in seconds")
@reports_errors
def set_values(host: str | None, port: int | None, led_map: str | None, timeout: float | None):
    """Update saved settings. Only the given options change."""
    state = get_state()
    current = state.load_file_config()

    updates: dict = {}
    if host is not None:
        updates["host"] = host
    if port is not None:
        updates["port"] = port
    if led_map is not None:
        try:
            updates["led_map"] = parse_led_map(led_map)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--led-map") from e
    if timeout is not None:
        updates["timeout"] = timeout

    if not updates:
        raise click.UsageError("Nothing to set. Pass at least one option.")

    try:
        new_config = ClientConfig.model_validate({**current.model_dump(), **updates})
    except ValidationError as e:
        raise wrap_pydantic_error(e, str(state.config_path)) from e

    new_config.save(state.config_path)
    for key, value in updates.items():
        click.echo(f"[OK] {key} = {value}")
