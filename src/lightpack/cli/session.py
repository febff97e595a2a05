"""Shared CLI state: effective configuration, client sessions and error reporting."""

import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from functools import wraps
from pathlib import Path
from typing import Any, Optional

import click
from pydantic import ValidationError

from lightpack.client import LightpackClient
from lightpack.exceptions import (
    LightpackError,
    format_error_for_display,
    log_failures,
    wrap_pydantic_error,
)
from lightpack.models import DEFAULT_CONFIG_PATH, ClientConfig

logger = logging.getLogger(__name__)


def parse_led_map(text: str) -> list[int]:
    """
    Parse an LED map such as "1,2,3" or "1-10,12".

    Raises:
        ValueError: If a part is not a number or a low-high range
    """
    leds: list[int] = []
    for part in (p.strip() for p in text.split(",")):
        if not part:
            continue
        if "-" in part:
            low, high = (int(x) for x in part.split("-", 1))
            if high < low:
                raise ValueError(f"Range {part!r} is descending")
            leds.extend(range(low, high + 1))
        else:
            leds.append(int(part))
    return leds


@dataclass
class CliState:
    """Options given to the top-level command group."""

    config_path: Path = DEFAULT_CONFIG_PATH
    overrides: dict[str, Any] = field(default_factory=dict)

    def load_file_config(self) -> ClientConfig:
        """Load the config file, or defaults if it does not exist."""
        return ClientConfig.load_or_default(self.config_path)

    def resolve_config(self) -> ClientConfig:
        """Config file values with command line overrides applied."""
        base = self.load_file_config()
        if not self.overrides:
            return base
        try:
            return ClientConfig.model_validate({**base.model_dump(), **self.overrides})
        except ValidationError as e:
            raise wrap_pydantic_error(e, "command line") from e


@contextmanager
def client_session(state: CliState) -> Iterator[LightpackClient]:
    """Open a client for the effective config and close it afterwards."""
    config = state.resolve_config()
    with log_failures(f"connect to {config.host}:{config.port}", logger):
        client = LightpackClient.from_config(config)
    with client:
        yield client


def run_locked(client: LightpackClient, action: Callable[[LightpackClient], str]) -> str:
    """
    Run a mutating action while holding the API lock.

    Raises:
        click.ClickException: If the device refuses the lock
    """
    with client.locked() as acquired:
        if not acquired:
            raise click.ClickException(
                "The Lightpack API is locked by another client. Try again later."
            )
        return action(client)


def reports_errors(func: Callable) -> Callable:
    """Print LightpackErrors without a traceback and exit with status 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except LightpackError as e:
            logger.debug(f"Command failed: {e.technical_message}")
            user_message, recovery_hint = format_error_for_display(e)
            click.echo(f"ERROR: {user_message}", err=True)
            if recovery_hint:
                click.echo(recovery_hint, err=True)
            sys.exit(1)

    return wrapper


def get_state(ctx: Optional[click.Context] = None) -> CliState:
    """Get the CliState stored by the top-level group."""
    ctx = ctx or click.get_current_context()
    return ctx.ensure_object(CliState)
