from __future__ import annotations

"""Extraction functions turning a decoded payload into one number.

Filters are looked up by name from the config file. Payload shapes follow the
upstream APIs: WeatherFlow station observations, dump1090 aircraft.json and
Azure DevOps agent pools.
"""

from typing import Any, Callable, Dict, Optional


Filter = Callable[[Any], Any]

FILTERS: Dict[str, Filter] = {}

BUSY_AGENT_STATES = {"RunningRequest", "Provisioning"}


def register_filter(name: str) -> Callable[[Filter], Filter]:
    def deco(fn: Filter) -> Filter:
        FILTERS[name] = fn
        return fn
    return deco


@register_filter("value")
def value(payload: Any) -> Any:
    return payload["value"]


@register_filter("wind_gust")
def wind_gust(payload: Any) -> Any:
    return payload["obs"][0]["wind_gust"]


@register_filter("flights")
def flights(payload: Any) -> int:
    """Aircraft that report a flight number."""
    return len([a for a in payload["aircraft"] if a.get("flight")])


@register_filter("busy_agents")
def busy_agents(payload: Any) -> int:
    return len([a for a in payload["value"] if a.get("provisioningState") in BUSY_AGENT_STATES])


def path_filter(value_path: str) -> Filter:
    """Build a filter walking a dotted path; digits index into lists."""
    parts = [p for p in value_path.split(".") if p]

    def _extract(payload: Any) -> Any:
        node = payload
        for p in parts:
            if isinstance(node, list):
                node = node[int(p)]
            else:
                node = node[p]
        return node

    return _extract


def resolve_filter(name: Optional[str] = None, value_path: Optional[str] = None) -> Filter:
    if name:
        try:
            return FILTERS[name]
        except KeyError:
            raise KeyError(f"unknown filter '{name}' (known: {', '.join(sorted(FILTERS))})") from None
    if value_path:
        return path_filter(value_path)
    raise ValueError("either a filter name or a value_path is required")
