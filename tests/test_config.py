"""Tests for config module."""

import pytest

from fibs.config import AppConfig, get_app_config


def test_defaults(monkeypatch):
    """Test configuration defaults."""
    for name in (
        "FIBS_MODE",
        "FIBS_NUMERIC_TYPE",
        "FIBS_INDEX",
        "FIBS_COUNT",
        "FIBS_BENCH_ITERATIONS",
        "FIBS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = get_app_config()

    assert config == AppConfig()
    assert config.mode == "term"
    assert config.numeric_type == "u64"
    assert config.index == 10


def test_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("FIBS_MODE", "Sequence")
    monkeypatch.setenv("FIBS_NUMERIC_TYPE", "u8")
    monkeypatch.setenv("FIBS_INDEX", "14")
    monkeypatch.setenv("FIBS_COUNT", "7")
    monkeypatch.setenv("FIBS_BENCH_ITERATIONS", "5")
    monkeypatch.setenv("FIBS_LOG_LEVEL", "debug")

    config = AppConfig.from_env()

    assert config.mode == "sequence"
    assert config.numeric_type == "u8"
    assert config.index == 14
    assert config.count == 7
    assert config.bench_iterations == 5
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"mode": "plot"}, "Unknown mode"),
        ({"index": -1}, "index must be non-negative"),
        ({"count": -1}, "count must be non-negative"),
        ({"bench_iterations": 0}, "bench_iterations must be positive"),
    ],
)
def test_validation(kwargs, message):
    """Test that invalid configuration raises error."""
    with pytest.raises(ValueError, match=message):
        AppConfig(**kwargs)
