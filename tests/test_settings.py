"""Tests for time formatting and configuration parsing."""

import logging

import pytest

from rotation_planner.utils import (
    AppSettings,
    format_time,
    parse_half_length,
    parse_sub_interval,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ROTATION_HOST", "ROTATION_PORT", "ROTATION_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "0:00"), (59, "0:59"), (60, "1:00"), (125, "2:05"), (3661, "61:01")],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("18", 18), (" 20 ", 20), (25, 25), (12.5, 12), ("12.5", 12), ("12abc", 12),
        ("", 18), ("abc", 18), (None, 18), ("0", 18), ("-4", 18), ("-3", 18),
        ("nan", 18), ("inf", 18),
    ],
)
def test_parse_half_length(raw, expected):
    assert parse_half_length(raw) == expected


def test_parse_half_length_reads_leading_digits_of_exponent():
    assert parse_half_length("1e308") == 1


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2.5", 150), ("3", 180), (1, 60), ("0.5", 30), ("", 150), ("x", 150), (None, 150),
        ("0", 150), ("-1", 150), ("-3", 150), ("nan", 150), ("inf", 150), ("-inf", 150),
        ("1e308", 150), (float("nan"), 150),
    ],
)
def test_parse_sub_interval(raw, expected):
    assert parse_sub_interval(raw) == expected


def test_app_settings_defaults(clean_env):
    settings = AppSettings(_env_file=None)
    assert (settings.host, settings.port, settings.log_level) == ("127.0.0.1", 7122, "INFO")


def test_app_settings_from_env(clean_env):
    clean_env.setenv("ROTATION_HOST", "0.0.0.0")
    clean_env.setenv("ROTATION_PORT", "8123")
    clean_env.setenv("ROTATION_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.host == "0.0.0.0"
    assert settings.port == 8123
    assert settings.log_level == "DEBUG"


def test_app_settings_invalid_values_fall_back(clean_env, caplog):
    clean_env.setenv("ROTATION_PORT", "http")
    clean_env.setenv("ROTATION_LOG_LEVEL", "loud")

    with caplog.at_level(logging.WARNING):
        settings = AppSettings(_env_file=None)

    assert settings.port == 7122
    assert settings.log_level == "INFO"
    assert "ROTATION_PORT" in caplog.text
    assert "ROTATION_LOG_LEVEL" in caplog.text


def test_app_settings_out_of_range_port(clean_env):
    clean_env.setenv("ROTATION_PORT", "70000")
    assert AppSettings(_env_file=None).port == 7122


def test_app_settings_explicit_values():
    settings = AppSettings(host="localhost", port=9000, log_level="warning")
    assert (settings.host, settings.port, settings.log_level) == ("localhost", 9000, "WARNING")
