"""Pytest fixtures for tests."""

import socket
import threading
from unittest.mock import Mock, patch

import pytest

from lightpack import LightpackClient
from lightpack.connection import DeviceConnection


class FakeDevice:
    """
    Minimal in-process Prismatik API server.

    Accepts one connection, reads newline-terminated commands and answers
    each with a scripted reply. Replies are looked up by the full command
    line (without newline), then by the command name before ':', and fall
    back to ``default``. A reply of None closes the connection instead.
    """

    def __init__(self, responses: dict | None = None, default: str | None = "ok\r\n"):
        self.responses = dict(responses or {})
        self.default = default
        self.received: list[str] = []
        self._server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._server.bind(("127.0.0.1", 0))
        self._server.listen(1)
        self.host, self.port = self._server.getsockname()
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def start(self) -> "FakeDevice":
        self._thread.start()
        return self

    def stop(self) -> None:
        self._server.close()
        self._thread.join(timeout=2.0)

    def _reply_for(self, line: str) -> str | None:
        command = line.rstrip("\n")
        if command in self.responses:
            return self.responses[command]
        name = command.split(":", 1)[0]
        return self.responses.get(name, self.default)

    def _serve(self) -> None:
        try:
            conn, _ = self._server.accept()
        except OSError:
            return
        with conn, conn.makefile("rb") as reader:
            for raw in reader:
                line = raw.decode("utf-8")
                self.received.append(line)
                reply = self._reply_for(line)
                if reply is None:
                    break
                conn.sendall(reply.encode("utf-8"))


@pytest.fixture
def fake_device():
    """Factory for started FakeDevice instances, stopped after the test."""
    devices: list[FakeDevice] = []

    def _make(responses: dict | None = None, default: str | None = "ok\r\n") -> FakeDevice:
        device = FakeDevice(responses, default).start()
        devices.append(device)
        return device

    yield _make

    for device in devices:
        device.stop()


@pytest.fixture
def unused_port():
    """A localhost port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def mock_connection():
    """Mock DeviceConnection whose receive() returns a configurable reply."""
    connection = Mock(spec=DeviceConnection)
    connection.receive.return_value = b"ok\r\n"
    connection.is_open = True
    connection.peer = ("127.0.0.1", 3636)
    return connection


@pytest.fixture
def make_client(mock_connection):
    """Create LightpackClients wired to mock_connection."""
    with patch("lightpack.client.DeviceConnection.open", return_value=mock_connection) as opener:
        def _make(led_map=(), host="127.0.0.1", port=3636, timeout=None):
            return LightpackClient(host, port, led_map, timeout)

        _make.opener = opener
        yield _make
