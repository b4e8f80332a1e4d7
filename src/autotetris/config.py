"""Configuration for the autoplayer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from .errors import ConfigError
from .evaluator import DEFAULT_WEIGHTS, EvaluationWeights


DEFAULT_TICK_INTERVAL = 0.2

ENV_TICK_INTERVAL = "AUTOTETRIS_TICK_INTERVAL"
ENV_ENABLED = "AUTOTETRIS_ENABLED"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class AutoplayConfig:
    """Settings handed to :class:`autotetris.actuator.AutoPlayer`.

    ``tick_interval`` is the delay in seconds between two autoplay actions.
    ``enabled`` only decides whether the player switches itself on when it is
    created; the mode can be toggled afterwards.
    """

    tick_interval: float = DEFAULT_TICK_INTERVAL
    enabled: bool = False
    weights: EvaluationWeights = field(default_factory=lambda: DEFAULT_WEIGHTS)

    def __post_init__(self) -> None:
        if not self.tick_interval > 0:
            raise ConfigError(f"tick_interval must be positive, got {self.tick_interval!r}")

    def with_overrides(self, **changes) -> "AutoplayConfig":
        """Return a copy with ``changes`` applied, skipping ``None`` values."""

        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AutoplayConfig":
        """Build a configuration from ``AUTOTETRIS_*`` environment variables."""

        env = os.environ if environ is None else environ
        kwargs = {}
        raw_interval = env.get(ENV_TICK_INTERVAL)
        if raw_interval is not None:
            try:
                kwargs["tick_interval"] = float(raw_interval)
            except ValueError:
                raise ConfigError(
                    f"{ENV_TICK_INTERVAL} must be a number, got {raw_interval!r}"
                ) from None
        raw_enabled = env.get(ENV_ENABLED)
        if raw_enabled is not None:
            value = raw_enabled.strip().lower()
            if value in _TRUE_VALUES:
                kwargs["enabled"] = True
            elif value in _FALSE_VALUES:
                kwargs["enabled"] = False
            else:
                raise ConfigError(f"{ENV_ENABLED} must be a boolean, got {raw_enabled!r}")
        return cls(**kwargs)
