import pytest
import pytz

from rainbow_utils.config import (
    ConfigError, DEFAULT_UPDATE_INTERVAL, MAX_UPDATE_INTERVAL, MIN_UPDATE_INTERVAL,
    load_settings, parse_bool, parse_interval,
)


def test_load_settings_defaults():
    settings = load_settings({"DISCORD_BOT_TOKEN": "abc"})
    assert settings.token == "abc"
    assert settings.update_interval == DEFAULT_UPDATE_INTERVAL
    assert settings.die_on_boot is False
    assert settings.stats_timezone is pytz.utc
    assert settings.log_level == "INFO"


def test_load_settings_reads_all_values():
    settings = load_settings({
        "DISCORD_BOT_TOKEN": "abc",
        "RAINBOW_UPDATE_INTERVAL": "15.5",
        "RAINBOW_DIE_ON_BOOT": "Yes",
        "RAINBOW_STATS_TIMEZONE": "Asia/Manila",
        "RAINBOW_LOG_LEVEL": "debug",
    })
    assert settings.update_interval == 15.5
    assert settings.die_on_boot is True
    assert settings.stats_timezone.zone == "Asia/Manila"
    assert settings.log_level == "DEBUG"


def test_missing_token_is_fatal():
    with pytest.raises(ConfigError):
        load_settings({})


@pytest.mark.parametrize("raw, expected", [
    ("1", MIN_UPDATE_INTERVAL),
    ("100000", MAX_UPDATE_INTERVAL),
    ("45", 45.0),
])
def test_interval_is_clamped(raw, expected):
    assert parse_interval(raw) == expected


@pytest.mark.parametrize("raw", ["fast", "nan", "inf"])
def test_bad_interval_rejected(raw):
    with pytest.raises(ConfigError):
        parse_interval(raw)


def test_parse_bool():
    assert parse_bool(None, "X") is False
    assert parse_bool("off", "X") is False
    assert parse_bool("TRUE", "X") is True
    with pytest.raises(ConfigError):
        parse_bool("maybe", "X")


def test_unknown_timezone_rejected():
    with pytest.raises(ConfigError):
        load_settings({"DISCORD_BOT_TOKEN": "abc", "RAINBOW_STATS_TIMEZONE": "Mars/Olympus"})


def test_unknown_log_level_rejected():
    with pytest.raises(ConfigError):
        load_settings({"DISCORD_BOT_TOKEN": "abc", "RAINBOW_LOG_LEVEL": "LOUD"})
