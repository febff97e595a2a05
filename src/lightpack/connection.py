"""TCP transport to the Prismatik API server."""

import logging
import socket
from typing import Optional

from lightpack.exceptions import ConnectionClosedError, DeviceIOError, wrap_socket_error

logger = logging.getLogger(__name__)


class DeviceConnection:
    """
    One open TCP stream to the device.

    The connection is exclusively owned by a single LightpackClient. It does
    no framing of its own: ``send`` writes whatever bytes it is given and
    ``receive`` performs exactly one ``recv`` call.

    Not thread-safe. Callers sharing a connection across threads must
    serialize exchanges themselves.
    """

    def __init__(self, sock: socket.socket, host: str, port: int):
        """
        Wrap an already connected socket.

        Args:
            sock: Connected TCP socket (ownership is transferred)
            host: Host the socket is connected to
            port: Port the socket is connected to
        """
        self._sock: Optional[socket.socket] = sock
        self._host = host
        self._port = port

    @classmethod
    def open(cls, host: str, port: int, timeout: Optional[float] = None) -> "DeviceConnection":
        """
        Connect to ``host:port``.

        Args:
            host: Hostname or IP address
            port: TCP port
            timeout: Socket timeout in seconds, applied to connect and to every
                     later read and write (None = block indefinitely)

        Returns:
            Open connection

        Raises:
            DeviceUnreachableError: If the connection cannot be established
        """
        logger.debug(f"Connecting to {host}:{port} (timeout={timeout})")
        try:
            sock = socket.create_connection((host, port), timeout=timeout)
        except OSError as e:
            logger.error(f"Failed to connect to {host}:{port}: {e}")
            raise wrap_socket_error(e, host, port, "connect") from e

        # Each command is a single short line; do not let Nagle hold it back
        try:
            sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        except OSError as e:
            logger.error(f"Failed to configure socket for {host}:{port}: {e}")
            sock.close()
            raise wrap_socket_error(e, host, port, "connect") from e

        logger.info(f"Connected to Lightpack at {host}:{port}")
        return cls(sock, host, port)

    @property
    def peer(self) -> tuple[str, int]:
        """Get (host, port) of the device."""
        return (self._host, self._port)

    @property
    def is_open(self) -> bool:
        """Check if the connection has not been closed."""
        return self._sock is not None

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise ConnectionClosedError(*self.peer)
        return self._sock

    def send(self, data: bytes) -> None:
        """
        Write all of ``data`` to the device.

        Raises:
            ConnectionClosedError: If the connection was closed
            DeviceIOError: If the write fails
        """
        sock = self._require_socket()
        try:
            sock.sendall(data)
        except OSError as e:
            logger.error(f"Write to {self._host}:{self._port} failed: {e}")
            raise wrap_socket_error(e, self._host, self._port, "write") from e

    def receive(self, bufsize: int) -> bytes:
        """
        Read once from the device, returning at most ``bufsize`` bytes.

        This is a single ``recv`` call. A reply longer than ``bufsize`` or
        split across TCP segments is returned partially.

        Raises:
            ConnectionClosedError: If the connection was closed
            DeviceIOError: If the read fails or the device closed the stream
        """
        sock = self._require_socket()
        try:
            data = sock.recv(bufsize)
        except OSError as e:
            logger.error(f"Read from {self._host}:{self._port} failed: {e}")
            raise wrap_socket_error(e, self._host, self._port, "read") from e

        if not data:
            logger.error(f"Connection to {self._host}:{self._port} closed by device")
            raise DeviceIOError("read", original_error="connection closed by device")
        return data

    def close(self) -> None:
        """Close the socket. Safe to call more than once; never raises."""
        sock, self._sock = self._sock, None
        if sock is None:
            return

        try:
            sock.close()
        except OSError as e:
            logger.error(f"Error closing connection to {self._host}:{self._port}: {e}")
        else:
            logger.info(f"Disconnected from {self._host}:{self._port}")

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"DeviceConnection({self._host!r}, {self._port}, {state})"
