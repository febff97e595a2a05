"""Device command implementations (queries and mutations)."""

import click
from pydantic import ValidationError

from lightpack.models import Color

from ..session import client_session, get_state, reports_errors, run_locked


def parse_color(value: str) -> Color:
    """
    Parse "#RRGGBB", "RRGGBB" or "R,G,B" into a Color.

    Raises:
        click.BadParameter: If the value is not a valid color
    """
    try:
        if "," in value:
            r, g, b = (int(part) for part in value.split(","))
            return Color(r=r, g=g, b=b)
        return Color.from_hex(value)
    except (ValueError, ValidationError) as e:
        raise click.BadParameter(
            f"{value!r} is not a color. Use #RRGGBB or R,G,B with components 0-255."
        ) from e


@click.command(name="status")
@reports_errors
def status():
    """Show whether the LEDs are on, off or unavailable."""
    with client_session(get_state()) as client:
        click.echo(client.get_status().strip())


@click.command(name="api-status")
@reports_errors
def api_status():
    """Show whether the API is idle or busy (locked)."""
    with client_session(get_state()) as client:
        click.echo(client.get_api_status().strip())


@click.command(name="profiles")
@reports_errors
def profiles():
    """List the profiles saved on the device."""
    with client_session(get_state()) as client:
        current = client.get_profile().strip()
        for name in client.get_profiles():
            marker = "*" if name == current else " "
            click.echo(f"{marker} {name}")


@click.command(name="profile")
@click.argument("name", required=False)
@reports_errors
def profile(name: str | None):
    """Show the active profile, or activate NAME."""
    with client_session(get_state()) as client:
        if name is None:
            click.echo(client.get_profile().strip())
            return
        click.echo(run_locked(client, lambda c: c.set_profile(name)).strip())


@click.command(name="leds")
@reports_errors
def leds():
    """Show how many LEDs the device drives."""
    with client_session(get_state()) as client:
        click.echo(client.get_count_leds())


@click.command(name="color")
@click.argument("value")
@click.option(
    "--led",
    "-l",
    type=click.IntRange(min=0),
    default=None,
    help="Device LED channel to set (default: every LED in the LED map)",
)
@reports_errors
def color(value: str, led: int | None):
    """
    Set LED color to VALUE (#RRGGBB or R,G,B).

    \b
    Examples:
      lightpack --led-map 1-10 color "#FF8000"
      lightpack color 255,0,0 --led 3
    """
    rgb = parse_color(value)
    state = get_state()

    if led is None and not state.resolve_config().led_map:
        raise click.UsageError(
            "No LED map configured. Pass --led or set one with --led-map / 'config set'."
        )

    with client_session(state) as client:
        if led is None:
            target = "all LEDs"
            response = run_locked(client, lambda c: c.set_color_for_all_rgb(rgb))
        else:
            target = f"LED {led}"
            response = run_locked(client, lambda c: c.set_color_rgb(led, rgb))
        click.echo(f"{target} -> {rgb.to_hex()}: {response.strip()}")


@click.command(name="gamma")
@click.argument("value", type=click.FloatRange(0.01, 10.0))
@reports_errors
def gamma(value: float):
    """Set gamma correction (0.01-10.0)."""
    with client_session(get_state()) as client:
        click.echo(run_locked(client, lambda c: c.set_gamma(value)).strip())


@click.command(name="smooth")
@click.argument("value", type=click.IntRange(0, 255))
@reports_errors
def smooth(value: int):
    """Set transition smoothness (0-255)."""
    with client_session(get_state()) as client:
        click.echo(run_locked(client, lambda c: c.set_smoothness(value)).strip())


@click.command(name="brightness")
@click.argument("value", type=click.IntRange(0, 100))
@reports_errors
def brightness(value: int):
    """Set brightness (0-100)."""
    with client_session(get_state()) as client:
        click.echo(run_locked(client, lambda c: c.set_brightness(value)).strip())


@click.command(name="on")
@reports_errors
def turn_on():
    """Turn the LEDs on."""
    with client_session(get_state()) as client:
        click.echo(run_locked(client, lambda c: c.turn_on()).strip())


@click.command(name="off")
@reports_errors
def turn_off():
    """Turn the LEDs off."""
    with client_session(get_state()) as client:
        click.echo(run_locked(client, lambda c: c.turn_off()).strip())


DEVICE_COMMANDS = [
    status,
    api_status,
    profiles,
    profile,
    leds,
    color,
    gamma,
    smooth,
    brightness,
    turn_on,
    turn_off,
]
