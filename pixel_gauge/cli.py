from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .app import build_scheduler, open_display
from .config import DEFAULT_CONFIG_PATH, ConfigError, load_config, select_source
from .env import load_env
from .utils import setup_logging


log = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="pixel-gauge", description="Show a polled value on a small OLED.")
    ap.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH)
    ap.add_argument("--data-type", help="override data_type from the config file")
    ap.add_argument("--headless", action="store_true", help="run without any display")
    ap.add_argument("--iterations", type=int, default=None, help="stop after N ticks")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args(argv)

    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO))
    load_env()
    try:
        cfg = load_config(args.config)
        name, source = select_source(cfg, args.data_type)
    except ConfigError as e:
        log.error("missing config. Stopping. (%s)", e)
        return 1

    try:
        display = None if args.headless else open_display(cfg.display)
    except Exception as e:
        log.exception("display unavailable. Stopping. (%s)", e)
        return 1
    scheduler = build_scheduler(name, source, cfg.display, display)
    scheduler.run(iterations=args.iterations)
    return 0


if __name__ == "__main__":
    sys.exit(main())
