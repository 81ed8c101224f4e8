"""
Tests for instance filter classification.
"""

import pytest

from awsinfo.core.filters import FilterKind, InstanceFilter, classify


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "raw",
        ["i-0abc123", "i-1234567890abcdef0", "i-x", "i-under_score"],
    )
    def test_instance_ids(self, raw):
        """Test that i- followed by word characters is an instance id."""
        assert classify(raw).kind is FilterKind.INSTANCE_ID

    @pytest.mark.parametrize(
        "raw",
        ["10.0.0.1", "203.0.113.7", "999.999.999.999", "1.2.3.4"],
    )
    def test_ip_addresses(self, raw):
        """Test that dotted quads are IPs, without octet range checks."""
        assert classify(raw).kind is FilterKind.IP_ADDRESS

    @pytest.mark.parametrize(
        "raw",
        [
            "web-01",
            "i-",
            "i-abc-def",
            "I-0abc123",
            "x i-0abc123",
            "10.0.0",
            "10.0.0.1.5",
            "10.0.0.a",
            "",
            "production database",
        ],
    )
    def test_tag_values(self, raw):
        """Test that anything else is a tag value."""
        assert classify(raw).kind is FilterKind.TAG_VALUE

    def test_value_is_preserved(self):
        """Test that the raw text is kept as the filter value."""
        assert classify("web-01").value == "web-01"


class TestInstanceFilter:
    """Tests for InstanceFilter."""

    @pytest.mark.parametrize(
        "kind, name",
        [
            (FilterKind.INSTANCE_ID, "instance-id"),
            (FilterKind.IP_ADDRESS, "ip-address"),
            (FilterKind.TAG_VALUE, "tag-value"),
        ],
    )
    def test_to_filters(self, kind, name):
        """Test conversion to the describe_instances Filters parameter."""
        instance_filter = InstanceFilter(kind, "value")
        assert instance_filter.to_filters() == [{"Name": name, "Values": ["value"]}]

    def test_str(self):
        """Test the human-readable form used in log messages."""
        assert str(classify("i-0abc")) == "instance-id=i-0abc"
