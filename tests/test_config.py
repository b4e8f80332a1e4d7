from __future__ import annotations

import pytest

from autotetris.config import DEFAULT_TICK_INTERVAL, AutoplayConfig
from autotetris.errors import ConfigError
from autotetris.evaluator import DEFAULT_WEIGHTS


def test_defaults() -> None:
    config = AutoplayConfig()
    assert config.tick_interval == DEFAULT_TICK_INTERVAL == 0.2
    assert config.enabled is False
    assert config.weights == DEFAULT_WEIGHTS


@pytest.mark.parametrize("interval", [0, -0.5])
def test_non_positive_interval_rejected(interval: float) -> None:
    with pytest.raises(ConfigError):
        AutoplayConfig(tick_interval=interval)


def test_from_env_reads_variables() -> None:
    config = AutoplayConfig.from_env(
        {"AUTOTETRIS_TICK_INTERVAL": "0.05", "AUTOTETRIS_ENABLED": "yes"}
    )
    assert config.tick_interval == pytest.approx(0.05)
    assert config.enabled is True


def test_from_env_without_variables_uses_defaults() -> None:
    assert AutoplayConfig.from_env({}) == AutoplayConfig()


@pytest.mark.parametrize(
    "environ",
    [
        {"AUTOTETRIS_TICK_INTERVAL": "fast"},
        {"AUTOTETRIS_ENABLED": "maybe"},
        {"AUTOTETRIS_TICK_INTERVAL": "-1"},
    ],
)
def test_from_env_rejects_bad_values(environ: dict) -> None:
    with pytest.raises(ConfigError):
        AutoplayConfig.from_env(environ)


def test_with_overrides_skips_none() -> None:
    config = AutoplayConfig().with_overrides(tick_interval=None, enabled=True)
    assert config.tick_interval == DEFAULT_TICK_INTERVAL
    assert config.enabled is True
