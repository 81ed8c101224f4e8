"""
Tests for run settings.
"""

import dataclasses
from pathlib import Path

import pytest

from awsinfo.core.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_REGION, Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("AWSINFO_CLIENTS_DIR", "AWSINFO_REGION", "AWSINFO_DIG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, clean_env):
        settings = Settings.from_options(client="acme")

        assert settings.client == "acme"
        assert settings.region == DEFAULT_REGION
        assert settings.clients_dir == Path("~/.awsinfo/clients").expanduser()
        assert settings.dig_command == "dig"
        assert settings.max_attempts == DEFAULT_MAX_ATTEMPTS
        assert settings.output_format == "text"
        assert not settings.is_detail

    def test_environment_fallbacks(self, clean_env, tmp_path):
        clean_env.setenv("AWSINFO_CLIENTS_DIR", str(tmp_path))
        clean_env.setenv("AWSINFO_REGION", "eu-west-1")
        clean_env.setenv("AWSINFO_DIG", "/opt/bind/bin/dig")

        settings = Settings.from_options()

        assert settings.clients_dir == tmp_path
        assert settings.region == "eu-west-1"
        assert settings.dig_command == "/opt/bind/bin/dig"

    def test_options_override_environment(self, clean_env, tmp_path):
        clean_env.setenv("AWSINFO_REGION", "eu-west-1")

        settings = Settings.from_options(region="ap-southeast-2", clients_dir=str(tmp_path))

        assert settings.region == "ap-southeast-2"
        assert settings.clients_dir == tmp_path

    def test_none_options_keep_defaults(self, clean_env):
        settings = Settings.from_options(api_timeout=None, max_attempts=None, filter_text="web")

        assert settings.api_timeout == 30
        assert settings.max_attempts == 1
        assert settings.is_detail

    def test_is_immutable(self, clean_env):
        settings = Settings.from_options(client="acme")
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.client = "other"

    def test_rejects_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            Settings(clients_dir=tmp_path, output_format="xml")

    def test_rejects_zero_attempts(self, tmp_path):
        with pytest.raises(ValueError):
            Settings(clients_dir=tmp_path, max_attempts=0)
