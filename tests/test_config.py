"""Tests for configuration helpers."""

import config
from config.core import parse_args
from config.settings import SETTINGS, AppSettings


def test_settings_strip_trailing_slash():
    assert AppSettings(api_url="http://plant.test/").api_url == "http://plant.test"


def test_parse_args_reads_flags_and_ignores_unknown():
    settings = parse_args(["--api-url", "http://plant.test/", "--locale", "te", "--server.port", "8501"])

    assert settings.api_url == "http://plant.test"
    assert settings.locale == "te"


def test_parse_args_defaults_to_environment_settings():
    settings = parse_args([])

    assert settings.api_url == SETTINGS.api_url
    assert settings.timeout == SETTINGS.request_timeout_sec
    assert settings.locale == SETTINGS.default_locale


def test_package_reexports():
    assert config.SETTINGS is SETTINGS
    assert config.parse_args is parse_args
