from __future__ import annotations

"""Utilities: logging setup, rounding and small numeric helpers."""

import logging
import math
import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )


def round_half_away(x: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with ties going away from zero.

    Goes through ``repr`` so 2.675 rounds to 2.68 the way it reads, not the
    way the binary float stores it.
    """
    q = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(float(x))).quantize(q, rounding=ROUND_HALF_UP))


def safe_float(x: Any) -> float | None:
    try:
        if x is None or isinstance(x, bool):
            return None
        v = float(x)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def format_sample(x: Optional[float]) -> str:
    """Short text for a raw sample: 5.0 -> '5', 5.25 -> '5.25', None -> '--'."""
    if x is None:
        return "--"
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))
