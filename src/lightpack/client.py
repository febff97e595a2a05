"""Client for the Prismatik/Lightpack text API."""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Optional

from lightpack.connection import DeviceConnection
from lightpack.exceptions import DeviceIOError
from lightpack.models import DEFAULT_PORT, ClientConfig, Color, LockState
from lightpack.protocol import commands
from lightpack.protocol.parser import (
    is_lock_success,
    is_unlock_success,
    parse_field,
    parse_int_field,
    parse_profiles,
)

logger = logging.getLogger(__name__)

# Replies are read with one recv of at most this many bytes
RESPONSE_BUFFER_SIZE = 8192


class LightpackClient:
    """
    Synchronous client for one Lightpack over one persistent TCP connection.

    Every operation is a single exchange: write one command line, then read
    one reply buffer. Queries parse the reply; mutations return it verbatim
    and leave success checking to the caller.

    Most mutations only take effect while this client holds the device's
    API lock, so a typical session looks like::

        with LightpackClient("127.0.0.1", 3636, led_map=[1, 2, 3]) as client:
            with client.locked() as acquired:
                if acquired:
                    client.set_color_for_all(255, 0, 0)

    The client is not thread-safe. Concurrent callers must serialize their
    calls, otherwise commands and replies interleave on the stream.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        led_map: Iterable[int] = (),
        timeout: Optional[float] = None,
    ):
        """
        Connect to a Lightpack.

        Args:
            host: Hostname or IP address of the Prismatik server
            port: Server API port (default: 3636)
            led_map: Device LED channel numbers in logical order. Copied, so
                     later changes to the caller's sequence have no effect.
            timeout: Socket timeout in seconds (None = block indefinitely)

        Raises:
            DeviceUnreachableError: If the connection cannot be established
        """
        self._led_map: tuple[int, ...] = tuple(int(led) for led in led_map)
        self._connection = DeviceConnection.open(host, port, timeout)
        self._lock_state = LockState.NOT_HELD

    @classmethod
    def from_config(cls, config: ClientConfig) -> "LightpackClient":
        """Create a client from a ClientConfig."""
        return cls(config.host, config.port, config.led_map, config.timeout)

    # Properties

    @property
    def led_map(self) -> tuple[int, ...]:
        """Get the LED channel numbers addressed by set_color_for_all."""
        return self._led_map

    @property
    def lock_state(self) -> LockState:
        """Get the client's belief about the device lock."""
        return self._lock_state

    @property
    def has_lock(self) -> bool:
        """Check if this client believes it holds the device lock."""
        return self._lock_state is LockState.HELD

    @property
    def closed(self) -> bool:
        """Check if close() has been called."""
        return not self._connection.is_open

    # Exchange primitive

    def exchange(self, command: str) -> str:
        """
        Send one command line and return one reply buffer.

        The reply is whatever a single read of up to RESPONSE_BUFFER_SIZE
        bytes returns. Longer replies, or replies split across TCP
        segments, come back truncated.

        Args:
            command: Complete command including its trailing newline

        Returns:
            Raw reply text

        Raises:
            ConnectionClosedError: If the client was closed
            DeviceIOError: If the write or read fails
        """
        logger.debug(f"Sending {command.rstrip()!r}")
        self._connection.send(command.encode("utf-8"))
        data = self._connection.receive(RESPONSE_BUFFER_SIZE)
        # A truncated read can end inside a multibyte character
        response = data.decode("utf-8", errors="replace")
        logger.debug(f"Received {response.rstrip()!r} ({len(data)} bytes)")
        return response

    # Queries

    def get_profiles(self) -> list[str]:
        """
        Get the names of the profiles saved on the device.

        Raises:
            MalformedResponseError: If the reply has no value field
        """
        return parse_profiles(self.exchange(commands.GET_PROFILES), commands.GET_PROFILES)

    def get_profile(self) -> str:
        """
        Get the active profile name.

        The value is not trimmed, so a trailing CRLF from the device is kept.
        """
        return parse_field(self.exchange(commands.GET_PROFILE), commands.GET_PROFILE)

    def get_status(self) -> str:
        """Get the raw status reply (e.g. 'status:on')."""
        return self.exchange(commands.GET_STATUS)

    def get_count_leds(self) -> int:
        """
        Get the number of LEDs the device drives.

        Raises:
            MalformedResponseError: If the reply has no value field
            ResponseFormatError: If the value is not an integer
        """
        return parse_int_field(self.exchange(commands.GET_COUNT_LEDS), commands.GET_COUNT_LEDS)

    def get_api_status(self) -> str:
        """Get the API status value (e.g. 'idle' or 'busy'), untrimmed."""
        return parse_field(self.exchange(commands.GET_API_STATUS), commands.GET_API_STATUS)

    # Mutations

    def set_color(self, led: int, red: int, green: int, blue: int) -> str:
        """
        Set the color of one LED.

        Args:
            led: Device LED channel number
            red: value between [0 - 255] inclusive
            green: value between [0 - 255] inclusive
            blue: value between [0 - 255] inclusive

        Returns:
            Raw reply from the device
        """
        return self.exchange(commands.set_color(led, red, green, blue))

    def set_color_rgb(self, led: int, color: Color) -> str:
        """Set the color of one LED from a Color."""
        return self.set_color(led, color.r, color.g, color.b)

    def set_color_for_all(self, red: int, green: int, blue: int) -> str:
        """
        Set every LED in the LED map to one color, in a single command.

        Returns:
            Raw reply from the device
        """
        return self.exchange(commands.set_color_for_all(self._led_map, red, green, blue))

    def set_color_for_all_rgb(self, color: Color) -> str:
        """Set every LED in the LED map from a Color."""
        return self.set_color_for_all(color.r, color.g, color.b)

    def set_gamma(self, gamma: float) -> str:
        """Set gamma correction, value between [0.01 - 10.0] inclusive."""
        return self.exchange(commands.set_gamma(gamma))

    def set_smoothness(self, smoothness: int) -> str:
        """Set transition smoothness, value between [0 - 255] inclusive."""
        return self.exchange(commands.set_smoothness(smoothness))

    def set_brightness(self, brightness: int) -> str:
        """Set brightness, value between [0 - 100] inclusive."""
        return self.exchange(commands.set_brightness(brightness))

    def set_profile(self, profile: str) -> str:
        """Activate a saved profile by name."""
        return self.exchange(commands.set_profile(profile))

    def turn_on(self) -> str:
        """Turn the LEDs on."""
        return self.exchange(commands.TURN_ON)

    def turn_off(self) -> str:
        """Turn the LEDs off."""
        return self.exchange(commands.TURN_OFF)

    # Lock lifecycle

    def lock(self) -> bool:
        """
        Ask the device for its exclusive API lock.

        A refusal (e.g. another client holds the lock) is not an error.

        Returns:
            True if the device answered lock:success
        """
        try:
            response = self.exchange(commands.LOCK)
        except DeviceIOError:
            self._lock_state = LockState.UNKNOWN
            raise

        if is_lock_success(response):
            self._lock_state = LockState.HELD
            logger.info("Acquired API lock")
            return True

        self._lock_state = LockState.NOT_HELD
        logger.warning(f"API lock refused: {response.strip()!r}")
        return False

    def unlock(self) -> bool:
        """
        Release the device's API lock.

        Returns:
            True if the lock was released or was not held in the first place
        """
        try:
            response = self.exchange(commands.UNLOCK)
        except DeviceIOError:
            self._lock_state = LockState.UNKNOWN
            raise

        if is_unlock_success(response):
            self._lock_state = LockState.NOT_HELD
            logger.info("Released API lock")
            return True

        self._lock_state = LockState.HELD
        logger.warning(f"API unlock refused: {response.strip()!r}")
        return False

    @contextmanager
    def locked(self) -> Iterator[bool]:
        """
        Hold the API lock for the duration of a ``with`` block.

        Yields the result of lock(). unlock() is called on exit only if the
        lock was acquired and the client is still open. When the block raises,
        a DeviceIOError from that unlock() is logged and the block's own
        exception propagates.
        """
        acquired = self.lock()
        try:
            yield acquired
        except BaseException:
            if acquired and not self.closed:
                try:
                    self.unlock()
                except DeviceIOError as e:
                    logger.error(f"Could not release API lock after failure: {e.technical_message}")
            raise
        if acquired and not self.closed:
            self.unlock()

    # Lifecycle

    def close(self) -> None:
        """Close the connection. No further commands are possible afterwards."""
        self._connection.close()

    def __enter__(self) -> "LightpackClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    # Identity

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LightpackClient):
            return NotImplemented
        return self._led_map == other._led_map and self._connection is other._connection

    def __hash__(self) -> int:
        return hash((id(self._connection), self._led_map))

    def __repr__(self) -> str:
        host, port = self._connection.peer
        state = "closed" if self.closed else self._lock_state.value
        return f"LightpackClient({host}:{port}, led_map={list(self._led_map)}, {state})"
