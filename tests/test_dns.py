"""
Tests for reverse DNS lookups.
"""

import subprocess

import pytest

from awsinfo.core import dns
from awsinfo.core.dns import DigResolver


def completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(
        args=["dig"], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestDigResolver:
    """Tests for DigResolver."""

    def test_builds_dig_command(self):
        """Test the dig invocation."""
        resolver = DigResolver(command="/usr/bin/dig")
        assert resolver.build_command("203.0.113.7") == [
            "/usr/bin/dig",
            "+short",
            "-x",
            "203.0.113.7",
        ]

    def test_returns_first_line(self, monkeypatch):
        """Test that the first PTR record is returned."""
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return completed("\nweb-01.example.com.\nalias.example.com.\n")

        monkeypatch.setattr(dns.subprocess, "run", fake_run)

        resolver = DigResolver(timeout=3)
        assert resolver.lookup("203.0.113.7") == "web-01.example.com."
        assert calls[0][0] == ["dig", "+short", "-x", "203.0.113.7"]
        assert calls[0][1]["timeout"] == 3

    def test_empty_output_is_none(self, monkeypatch):
        """Test that no PTR record gives None."""
        monkeypatch.setattr(dns.subprocess, "run", lambda cmd, **kwargs: completed(""))
        assert DigResolver().lookup("10.0.0.1") is None

    def test_nonzero_exit_is_none(self, monkeypatch, caplog):
        """Test that a dig failure is logged and gives None."""
        monkeypatch.setattr(
            dns.subprocess,
            "run",
            lambda cmd, **kwargs: completed(returncode=9, stderr="no servers"),
        )

        with caplog.at_level("WARNING"):
            assert DigResolver().lookup("10.0.0.1") is None
        assert "no servers" in caplog.text

    @pytest.mark.parametrize(
        "error",
        [
            FileNotFoundError("dig"),
            subprocess.TimeoutExpired(cmd="dig", timeout=5),
        ],
    )
    def test_errors_never_raise(self, monkeypatch, error):
        """Test that a missing or hung dig gives None."""

        def fake_run(cmd, **kwargs):
            raise error

        monkeypatch.setattr(dns.subprocess, "run", fake_run)
        assert DigResolver().lookup("10.0.0.1") is None

    def test_missing_executable(self):
        """Test a real invocation of a command that does not exist."""
        resolver = DigResolver(command="/nonexistent/awsinfo-dig")
        assert resolver.lookup("127.0.0.1") is None
