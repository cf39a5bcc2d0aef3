from __future__ import annotations

"""Wires a validated source config into a ready-to-run Scheduler."""

import logging
from typing import Optional

from .aggregator import make_aggregator
from .callbacks import CallbackDispatcher, WebhookCallback
from .config import DisplayConfig, SourceConfig
from .display import Display, PillowDisplay
from .renderer import Renderer
from .sampler import Sampler
from .scheduler import Scheduler
from .sources import make_fetcher
from .sources.filters import resolve_filter


log = logging.getLogger(__name__)


def open_display(cfg: DisplayConfig) -> PillowDisplay:
    display = PillowDisplay(cfg.width, cfg.height, hardware=cfg.hardware)
    display.init(cfg.bus, cfg.address)
    display.set_font(cfg.font)
    display.turn_on()
    display.clear_screen()
    return display


def build_scheduler(name: str, source: SourceConfig, display_cfg: DisplayConfig, display: Optional[Display] = None) -> Scheduler:
    fetcher = make_fetcher(source.url, timeout_s=source.fetch_timeout())
    sampler = Sampler(
        fetcher,
        source.url,
        resolve_filter(source.filter, source.value_path),
        auth=source.auth.as_tuple() if source.auth else None,
    )
    dispatcher = None
    if source.callback is not None:
        cb = source.callback
        dispatcher = CallbackDispatcher(
            WebhookCallback(cb.url, name, auth=cb.auth.as_tuple() if cb.auth else None, timeout_s=cb.timeout_s)
        )
    return Scheduler(
        name,
        sampler,
        make_aggregator(source.samples_to_average, source.samples_to_show),
        Renderer(display, display_cfg.width, display_cfg.height),
        interval_s=source.data_interval,
        min_max=source.min_max,
        dispatcher=dispatcher,
    )
