"""Unit tests for Lightpack reply parsing."""

import pytest

from lightpack.exceptions import MalformedResponseError, ResponseFormatError
from lightpack.protocol.parser import (
    is_lock_success,
    is_unlock_success,
    parse_field,
    parse_int_field,
    parse_profiles,
    split_fields,
)


@pytest.mark.unit
class TestSplitFields:
    """Test delimiter splitting."""

    def test_trailing_empty_fields_dropped(self):
        """Test trailing empties are removed, inner ones kept."""
        assert split_fields("a;b;;", ";") == ["a", "b"]
        assert split_fields("a;;b", ";") == ["a", "", "b"]

    def test_no_separator_returns_whole_text(self):
        """Test text without the separator is one field."""
        assert split_fields("status", ":") == ["status"]
        assert split_fields("", ";") == [""]

    def test_only_separators(self):
        """Test a string of separators has no fields."""
        assert split_fields(":", ":") == []


@pytest.mark.unit
class TestParseField:
    """Test key:value parsing."""

    def test_value_is_not_trimmed(self):
        """Test trailing CRLF stays on the value."""
        assert parse_field("profile:Default\r\n", "getprofile\n") == "Default\r\n"

    def test_second_field_only(self):
        """Test extra ':' fields are ignored."""
        assert parse_field("a:b:c", "x") == "b"

    def test_missing_value_raises(self):
        """Test reply without a value field raises MalformedResponseError."""
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_field("error\r\n", "getprofile\n")

        assert exc_info.value.command == "getprofile"
        assert exc_info.value.response == "error\r\n"

    def test_empty_value_is_missing(self):
        """Test 'key:' has no value field."""
        with pytest.raises(MalformedResponseError):
            parse_field("getprofile:", "getprofile\n")


@pytest.mark.unit
class TestParseIntField:
    """Test integer value parsing."""

    def test_parses_trimmed_integer(self):
        """Test whitespace around the number is ignored."""
        assert parse_int_field("countleds:10\r\n", "getcountleds\n") == 10

    def test_non_integer_raises_format_error(self):
        """Test non-numeric value raises ResponseFormatError."""
        with pytest.raises(ResponseFormatError) as exc_info:
            parse_int_field("countleds:many\r\n", "getcountleds\n")

        assert exc_info.value.field == "many\r\n"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_missing_field_raises_malformed(self):
        """Test missing value raises MalformedResponseError, not format error."""
        with pytest.raises(MalformedResponseError):
            parse_int_field("countleds\r\n", "getcountleds\n")


@pytest.mark.unit
class TestParseProfiles:
    """Test profile list parsing."""

    def test_profiles_with_sentinel(self):
        """Test the documented reply shape yields three names."""
        result = parse_profiles("getprofiles:Profile1;Profile2;Profile3;;\r\n")
        assert result == ["Profile1", "Profile2", "Profile3"]

    def test_single_profile(self):
        """Test a single profile reply."""
        assert parse_profiles("profiles:Lightpack;\r\n") == ["Lightpack"]

    def test_malformed(self):
        """Test reply without ':' raises MalformedResponseError."""
        with pytest.raises(MalformedResponseError):
            parse_profiles("xxxxxxxx")


@pytest.mark.unit
class TestLockReplies:
    """Test lock/unlock success detection."""

    def test_lock_success(self):
        """Test lock:success anywhere in the reply counts."""
        assert is_lock_success("lock:success\r\n")
        assert is_lock_success("noise lock:success more")

    def test_lock_failure(self):
        """Test other replies are failures."""
        assert not is_lock_success("lock:busy\r\n")
        assert not is_lock_success("lock:failed\r\n")

    def test_unlock_success(self):
        """Test both release replies count as success."""
        assert is_unlock_success("unlock:success\r\n")
        assert is_unlock_success("unlock:not locked\r\n")

    def test_unlock_failure(self):
        """Test an unexpected reply is a failure."""
        assert not is_unlock_success("error\r\n")
