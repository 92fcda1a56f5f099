"""Unit tests for core enums."""

import pytest

from expo.push.core import Compression, PushErrorCode


class TestCompression:
    """Test Compression option coercion."""

    def test_from_value_accepts_strings(self):
        assert Compression.from_value("enabled") is Compression.ENABLED
        assert Compression.from_value("node_compat") is Compression.NODE_COMPAT
        assert Compression.from_value("disabled") is Compression.DISABLED

    def test_from_value_passes_members_through(self):
        assert Compression.from_value(Compression.DISABLED) is Compression.DISABLED

    def test_from_value_rejects_unknown(self):
        with pytest.raises(ValueError, match="Invalid compression mode"):
            Compression.from_value("brotli")


def test_error_codes_match_wire_values():
    """Test error codes use Expo's wire strings."""
    assert PushErrorCode.DEVICE_NOT_REGISTERED.value == "DeviceNotRegistered"
    assert PushErrorCode("MessageRateExceeded") is PushErrorCode.MESSAGE_RATE_EXCEEDED
