from __future__ import annotations

"""Gauge configuration: YAML file validated with pydantic.

Example::

    data_type: wind
    display: {address: 0x3c, width: 128, height: 64}
    sources:
      wind:
        url: "https://swd.weatherflow.com/swd/rest/observations/station/${WEATHERFLOW_STATION_ID}?token=${WEATHERFLOW_TOKEN}"
        filter: wind_gust
        min_max: [0, 10]
        samples_to_show: 10
        data_interval: 10

``${VAR}`` references are expanded from the environment (see ``env.py``).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .sources.filters import FILTERS


log = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path("gauge.yaml")
DEFAULT_INTERVAL_S = 60
DEFAULT_MIN_MAX = (0.0, 10.0)


class ConfigError(Exception):
    """Configuration is missing or invalid; nothing can run."""


class AuthConfig(BaseModel):
    username: str = ""
    password: str = ""

    def as_tuple(self) -> Tuple[str, str]:
        return (self.username, self.password)


class CallbackConfig(BaseModel):
    url: str
    auth: Optional[AuthConfig] = None
    timeout_s: float = Field(10.0, gt=0)


class SourceConfig(BaseModel):
    url: Optional[str] = None
    auth: Optional[AuthConfig] = None
    filter: Optional[str] = None
    value_path: Optional[str] = None
    min_max: Tuple[float, float] = DEFAULT_MIN_MAX
    data_interval: float = Field(DEFAULT_INTERVAL_S, gt=0)
    samples_to_average: Optional[int] = Field(None, ge=1)
    samples_to_show: Optional[int] = Field(None, ge=1)
    callback: Optional[CallbackConfig] = None
    fetch_timeout_s: Optional[float] = Field(None, gt=0)

    @field_validator("min_max")
    @classmethod
    def _v_min_max(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        # a zero-width range cannot be scaled onto pixels
        if v[0] >= v[1]:
            raise ValueError("min_max must be [low, high] with low < high")
        return v

    @model_validator(mode="after")
    def _v_source(self) -> "SourceConfig":
        if self.samples_to_average and self.samples_to_show:
            raise ValueError("samples_to_average and samples_to_show are mutually exclusive")
        if not self.filter and not self.value_path:
            raise ValueError("one of filter or value_path is required")
        if self.filter and self.filter not in FILTERS:
            raise ValueError(f"unknown filter '{self.filter}'")
        return self

    def fetch_timeout(self) -> float:
        """Fetch timeout, never more than half the tick interval."""
        half = self.data_interval / 2
        if self.fetch_timeout_s:
            return min(self.fetch_timeout_s, half)
        return half


class DisplayConfig(BaseModel):
    bus: int = 1
    address: int = 0x3C
    width: int = Field(128, ge=8)
    height: int = Field(64, ge=24)
    font: Optional[str] = None
    hardware: bool = False


class GaugeConfig(BaseModel):
    data_type: Optional[str] = None
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    sources: Dict[str, SourceConfig] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _v_chart_fits(self) -> "GaugeConfig":
        # one column per slot, at least 1px wide
        for key, src in self.sources.items():
            if src.samples_to_show and src.samples_to_show > self.display.width:
                raise ValueError(
                    f"source '{key}': samples_to_show {src.samples_to_show} exceeds display width {self.display.width}"
                )
        return self


def _expand_env(node: Any) -> Any:
    if isinstance(node, str):
        return os.path.expandvars(node)
    if isinstance(node, dict):
        return {k: _expand_env(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_expand_env(v) for v in node]
    return node


def parse_config(data: Any) -> GaugeConfig:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    try:
        return GaugeConfig(**_expand_env(data))
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> GaugeConfig:
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    return parse_config(data)


def select_source(cfg: GaugeConfig, data_type: Optional[str] = None) -> Tuple[str, SourceConfig]:
    """Return the selected source, or raise ConfigError if it cannot run."""
    key = data_type or cfg.data_type
    if not key:
        raise ConfigError("no data_type selected")
    source = cfg.sources.get(key)
    if source is None:
        raise ConfigError(f"no source configured for data_type '{key}'")
    if not source.url:
        raise ConfigError(f"source '{key}' has no url")
    if "${" in source.url:
        log.warning("Source '%s' url still contains unresolved ${...} references", key)
    return key, source
