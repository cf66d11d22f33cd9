from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional
from zoneinfo import ZoneInfoNotFoundError

from .errors import ConfigError
from .time import resolve_zone
from ..words import standard as _standard  # noqa: F401  (registers the built-in word tables)
from ..words.registry import check_language, list_languages

logger = logging.getLogger(__name__)

DEFAULT_TIME_ZONE = "Asia/Tehran"
DEFAULT_LANGUAGE = "en_US"

ENV_PREFIX = "SHDATE_"


@dataclass(frozen=True)
class ShdateConfig:
    """
    Settings shared by the wrapper, the parser and the formatter.

    first_day_of_week uses the 1..7 convention (1 = Saturday ... 7 = Friday);
    the engines take the 0-based `fdow`.
    server_time_difference (ms) is added to every timestamp read from the clock.
    """
    time_zone: str = DEFAULT_TIME_ZONE
    language: str = DEFAULT_LANGUAGE
    first_day_of_week: int = 1
    server_time_difference: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.first_day_of_week, bool) or not isinstance(self.first_day_of_week, int):
            raise ConfigError(f"first_day_of_week must be an integer, got {self.first_day_of_week!r}")
        if not (1 <= self.first_day_of_week <= 7):
            raise ConfigError(
                f"first_day_of_week: {self.first_day_of_week} less than 1 or more than 7"
            )
        if not check_language(self.language):
            raise ConfigError(f"language '{self.language}' not found. Available: {list_languages()}")
        try:
            resolve_zone(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown time zone '{self.time_zone}'") from e
        if not isinstance(self.server_time_difference, int):
            raise ConfigError("server_time_difference must be an integer number of milliseconds")

    @property
    def fdow(self) -> int:
        """0-based first day of week for the engines (0 = Saturday)."""
        return self.first_day_of_week - 1

    def tweak(self, **kwargs) -> "ShdateConfig":
        return replace(self, **kwargs)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShdateConfig":
        env = os.environ if environ is None else environ
        kwargs = {}
        if f"{ENV_PREFIX}TIME_ZONE" in env:
            kwargs["time_zone"] = env[f"{ENV_PREFIX}TIME_ZONE"]
        if f"{ENV_PREFIX}LANGUAGE" in env:
            kwargs["language"] = env[f"{ENV_PREFIX}LANGUAGE"]
        for key in ("FIRST_DAY_OF_WEEK", "SERVER_TIME_DIFFERENCE"):
            raw = env.get(ENV_PREFIX + key)
            if raw is None:
                continue
            try:
                kwargs[key.lower()] = int(raw)
            except ValueError as e:
                raise ConfigError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from e
        logger.debug("config from environment: %s", kwargs)
        return cls(**kwargs)


DEFAULT_CONFIG = ShdateConfig()
