"""Tests for the exception hierarchy and error handling helpers."""

import logging
import socket

import pytest
from pydantic import ValidationError

from lightpack.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    ConfigurationError,
    ConnectionClosedError,
    DeviceConnectionError,
    DeviceIOError,
    DeviceUnreachableError,
    LightpackError,
    MalformedResponseError,
    ResponseError,
    ResponseFormatError,
    format_error_for_display,
    log_failures,
    wrap_pydantic_error,
    wrap_socket_error,
)
from lightpack.models import ClientConfig


@pytest.mark.unit
class TestHierarchy:
    """Test that every error can be caught through its base."""

    @pytest.mark.parametrize("error, bases", [
        (DeviceUnreachableError("h", 1), (DeviceConnectionError, LightpackError)),
        (ConnectionClosedError("h", 1), (DeviceConnectionError, LightpackError)),
        (DeviceIOError("read"), (LightpackError,)),
        (MalformedResponseError("getprofile", "x"), (ResponseError, LightpackError)),
        (ResponseFormatError("getcountleds", "c:x", "x"), (ResponseError, LightpackError)),
        (ConfigFileInvalidError("c.json", "bad"), (ConfigurationError, LightpackError)),
        (ConfigValidationError("port", 0, "too small"), (ConfigurationError, LightpackError)),
    ])
    def test_bases(self, error, bases):
        """Test isinstance against the documented parents."""
        for base in bases:
            assert isinstance(error, base)

    def test_io_error_is_not_connection_error(self):
        """Test I/O failures are distinct from connection setup failures."""
        assert not isinstance(DeviceIOError("write"), DeviceConnectionError)


@pytest.mark.unit
class TestMessages:
    """Test user and technical messages."""

    def test_str_is_user_message(self):
        """Test str() shows the user message."""
        error = DeviceUnreachableError("lamp", 3636, original_error="refused")
        assert str(error) == "Could not connect to Lightpack at lamp:3636."
        assert "refused" in error.technical_message
        assert "3636" in error.recovery_hint

    def test_full_message_includes_hint(self):
        """Test get_full_message appends the suggestion."""
        error = ConnectionClosedError("lamp", 3636)
        assert "Suggestion: Create a new client" in error.get_full_message()

    def test_response_error_keeps_reply(self):
        """Test response errors expose the command and raw reply."""
        error = MalformedResponseError("getprofile", "garbage")
        assert error.command == "getprofile"
        assert error.response == "garbage"
        assert "'garbage'" in error.technical_message

    def test_empty_config_file_message(self):
        """Test the empty-file case has its own message."""
        error = ConfigFileInvalidError("c.json", "File is empty")
        assert error.user_message == "Configuration file is empty"

    def test_format_error_for_display(self):
        """Test formatting for Lightpack and foreign errors."""
        message, hint = format_error_for_display(DeviceIOError("read"))
        assert "during read" in message
        assert hint

        message, hint = format_error_for_display(KeyError("x"))
        assert message.startswith("KeyError")
        assert hint is None


@pytest.mark.unit
class TestWrapSocketError:
    """Test OSError translation."""

    def test_connect(self):
        """Test connect failures become DeviceUnreachableError."""
        error = wrap_socket_error(ConnectionRefusedError("refused"), "lamp", 3636, "connect")
        assert isinstance(error, DeviceUnreachableError)
        assert error.host == "lamp"
        assert error.port == 3636

    def test_read_write(self):
        """Test other failures become DeviceIOError."""
        error = wrap_socket_error(ConnectionResetError("reset"), "lamp", 3636, "read")
        assert isinstance(error, DeviceIOError)
        assert error.operation == "read"
        assert error.original_error == "reset"

    def test_timeout(self):
        """Test timeouts are labelled as such."""
        error = wrap_socket_error(socket.timeout(), "lamp", 3636, "write")
        assert isinstance(error, DeviceIOError)
        assert error.original_error.startswith("timed out")


@pytest.mark.unit
class TestWrapPydanticError:
    """Test pydantic error translation."""

    def test_single_field(self):
        """Test one bad field names that field."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(port=0)

        error = wrap_pydantic_error(exc_info.value, "c.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "port"
        assert "3636" in error.recovery_hint

    def test_multiple_fields(self):
        """Test several bad fields are combined."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(port=0, host="")

        error = wrap_pydantic_error(exc_info.value, "c.json")
        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message

    def test_invalid_json(self):
        """Test JSON syntax errors become ConfigFileInvalidError."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig.model_validate_json("{not json")

        error = wrap_pydantic_error(exc_info.value, "c.json")
        assert isinstance(error, ConfigFileInvalidError)
        assert error.file_path == "c.json"

    def test_trailing_comma(self):
        """Test the JSON parser's own message reaches the error."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig.model_validate_json('{"host": "lamp",}')

        error = wrap_pydantic_error(exc_info.value, "c.json")
        assert error.user_message == "Configuration file has a trailing comma"
        assert "trailing comma" in error.parse_error


@pytest.mark.unit
class TestLogFailures:
    """Test the failure-logging context manager."""

    def test_logs_and_reraises(self, caplog):
        """Test library errors are logged with their technical message and propagated."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(DeviceIOError):
                with log_failures("read status"):
                    raise DeviceIOError("read", "reset")

        assert "Failed to read status" in caplog.text
        assert "reset" in caplog.text

    def test_other_errors_not_logged(self, caplog):
        """Test non-library exceptions pass through without a log record."""
        with caplog.at_level(logging.DEBUG):
            with pytest.raises(RuntimeError):
                with log_failures("set brightness"):
                    raise RuntimeError("locked by another client")

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert "Traceback" not in caplog.text

    def test_no_error(self, caplog):
        """Test a clean block logs completion at debug level."""
        with caplog.at_level(logging.DEBUG):
            with log_failures("noop"):
                pass
        assert "Completed: noop" in caplog.text
