# tests/test_config.py

import pytest

from shdate.core.config import DEFAULT_CONFIG, ShdateConfig
from shdate.core.errors import ConfigError, ShdateError


def test_defaults():
    assert DEFAULT_CONFIG.time_zone == "Asia/Tehran"
    assert DEFAULT_CONFIG.language == "en_US"
    assert DEFAULT_CONFIG.first_day_of_week == 1
    assert DEFAULT_CONFIG.fdow == 0
    assert DEFAULT_CONFIG.server_time_difference == 0

@pytest.mark.parametrize("kwargs", [
    {"first_day_of_week": 0},
    {"first_day_of_week": 8},
    {"first_day_of_week": "2"},
    {"first_day_of_week": True},
    {"language": "xx_XX"},
    {"time_zone": "Mars/Olympus"},
    {"server_time_difference": 1.5},
])
def test_rejected_values(kwargs):
    with pytest.raises(ConfigError):
        ShdateConfig(**kwargs)

def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        ShdateConfig(first_day_of_week=9)
    assert issubclass(ConfigError, ShdateError)

def test_tweak_returns_validated_copy():
    cfg = DEFAULT_CONFIG.tweak(first_day_of_week=3, language="fa_IR")
    assert cfg.fdow == 2
    assert cfg.language == "fa_IR"
    assert DEFAULT_CONFIG.first_day_of_week == 1
    with pytest.raises(ConfigError):
        DEFAULT_CONFIG.tweak(language="zz")

def test_from_env():
    cfg = ShdateConfig.from_env({
        "SHDATE_TIME_ZONE": "UTC",
        "SHDATE_LANGUAGE": "fa_IR",
        "SHDATE_FIRST_DAY_OF_WEEK": "2",
        "SHDATE_SERVER_TIME_DIFFERENCE": "-5000",
        "UNRELATED": "x",
    })
    assert cfg == ShdateConfig(
        time_zone="UTC", language="fa_IR", first_day_of_week=2, server_time_difference=-5000
    )

def test_from_env_empty_gives_defaults():
    assert ShdateConfig.from_env({}) == DEFAULT_CONFIG

def test_from_env_rejects_non_integers():
    with pytest.raises(ConfigError):
        ShdateConfig.from_env({"SHDATE_FIRST_DAY_OF_WEEK": "monday"})

def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SHDATE_LANGUAGE", "fa_IR")
    assert ShdateConfig.from_env().language == "fa_IR"
