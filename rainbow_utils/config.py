import os
import math
from datetime import tzinfo
import logging
from typing import NamedTuple, Optional

import pytz
from dotenv import load_dotenv

logger = logging.getLogger('nextcord.config')

DEFAULT_UPDATE_INTERVAL = 60  # seconds
MIN_UPDATE_INTERVAL = 10      # seconds (to prevent API abuse)
MAX_UPDATE_INTERVAL = 3600    # seconds (1 hour)
DEFAULT_STATS_TIMEZONE = "UTC"
DEFAULT_LOG_LEVEL = "INFO"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when an environment setting cannot be understood."""


class BotSettings(NamedTuple):
    token: str
    update_interval: float
    die_on_boot: bool
    stats_timezone: tzinfo
    log_level: str


def parse_bool(raw: Optional[str], name: str, default: bool = False) -> bool:
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got '{raw}'.")


def parse_interval(raw: Optional[str]) -> float:
    if raw is None or raw.strip() == "":
        return float(DEFAULT_UPDATE_INTERVAL)
    try:
        interval = float(raw)
    except ValueError:
        raise ConfigError(f"RAINBOW_UPDATE_INTERVAL must be a number of seconds, got '{raw}'.")
    if not math.isfinite(interval):
        raise ConfigError(f"RAINBOW_UPDATE_INTERVAL must be a finite number of seconds, got '{raw}'.")

    if interval < MIN_UPDATE_INTERVAL:
        logger.warning(f"Update interval {interval}s is below the minimum, using {MIN_UPDATE_INTERVAL}s instead.")
        return float(MIN_UPDATE_INTERVAL)
    if interval > MAX_UPDATE_INTERVAL:
        logger.warning(f"Update interval {interval}s is above the maximum, using {MAX_UPDATE_INTERVAL}s instead.")
        return float(MAX_UPDATE_INTERVAL)
    return interval


def parse_timezone(raw: Optional[str]) -> tzinfo:
    name = raw.strip() if raw and raw.strip() else DEFAULT_STATS_TIMEZONE
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ConfigError(f"RAINBOW_STATS_TIMEZONE '{name}' is not a known timezone.")


def load_settings(env: Optional[dict] = None) -> BotSettings:
    """Builds the bot settings from the environment.

    When ``env`` is omitted the process environment is used, after pulling in
    any ``.env`` file in the working directory.
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    token = env.get("DISCORD_BOT_TOKEN")
    if not token:
        raise ConfigError("DISCORD_BOT_TOKEN not found in .env file.")

    log_level = (env.get("RAINBOW_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"RAINBOW_LOG_LEVEL '{log_level}' is not a logging level.")

    return BotSettings(
        token=token,
        update_interval=parse_interval(env.get("RAINBOW_UPDATE_INTERVAL")),
        die_on_boot=parse_bool(env.get("RAINBOW_DIE_ON_BOOT"), "RAINBOW_DIE_ON_BOOT"),
        stats_timezone=parse_timezone(env.get("RAINBOW_STATS_TIMEZONE")),
        log_level=log_level,
    )
