"""
Command builders for the Prismatik/Lightpack text API.

The Wire Format
===============

Every command is one line of ASCII text terminated by ``\\n``. The device
does not answer until it has seen the terminator, so each builder here
returns a complete line::

    setcolor:1-255,0,10;2-255,0,10;\\n
    │        └────┬────┘└────┬────┘ └─ terminator
    │          LED 1       LED 2
    └─ command name

Setting Colors
--------------

``setcolor`` takes one ``<led>-<r>,<g>,<b>;`` segment per LED, where
``<led>`` is the device channel number (not the logical index). Several
segments may be packed into one line to update many LEDs at once.

Number Formatting
-----------------

Integers are written as plain decimal digits. Gamma is the only float and
is always written with one digit after a ``.`` decimal point. Python's
format specs (``%d``, ``.1f``) never consult the locale, so a host
configured for ``de_DE`` still produces ``setgamma:2.0``.

Ranges
------

The documented ranges (components 0-255, gamma 0.01-10.0, smoothness
0-255, brightness 0-100) are not checked here. Out-of-range values are
sent as-is and the device decides whether to reject them.
"""

from collections.abc import Iterable

GET_PROFILES = "getprofiles\n"
GET_PROFILE = "getprofile\n"
GET_STATUS = "getstatus\n"
GET_COUNT_LEDS = "getcountleds\n"
GET_API_STATUS = "getstatusapi\n"
LOCK = "lock\n"
UNLOCK = "unlock\n"
TURN_ON = "setstatus:on\n"
TURN_OFF = "setstatus:off\n"


def _color_segment(led: int, red: int, green: int, blue: int) -> str:
    return "%d-%d,%d,%d;" % (led, red, green, blue)


def set_color(led: int, red: int, green: int, blue: int) -> str:
    """
    Build a command that sets one LED.

    Args:
        led: Device LED channel number
        red: Red component (0-255)
        green: Green component (0-255)
        blue: Blue component (0-255)

    Example:
        >>> set_color(5, 10, 20, 30)
        'setcolor:5-10,20,30;\\n'
    """
    return "setcolor:" + _color_segment(led, red, green, blue) + "\n"


def set_color_for_all(led_map: Iterable[int], red: int, green: int, blue: int) -> str:
    """
    Build a command that sets every LED in ``led_map`` to one color.

    Example:
        >>> set_color_for_all([0, 1, 2], 255, 0, 10)
        'setcolor:0-255,0,10;1-255,0,10;2-255,0,10;\\n'
    """
    segments = "".join(_color_segment(led, red, green, blue) for led in led_map)
    return "setcolor:" + segments + "\n"


def set_gamma(gamma: float) -> str:
    """Build a gamma command (0.01-10.0), formatted with one decimal digit."""
    return "setgamma:%.1f\n" % gamma


def set_smoothness(smoothness: int) -> str:
    """Build a smoothness command (0-255)."""
    return "setsmooth:%d\n" % smoothness


def set_brightness(brightness: int) -> str:
    """Build a brightness command (0-100)."""
    return "setbrightness:%d\n" % brightness


def set_profile(profile: str) -> str:
    """Build a command that activates a saved profile by name."""
    return "setprofile:%s\n" % profile
