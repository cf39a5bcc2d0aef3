from __future__ import annotations

"""Affine mapping from sample values onto pixel extents."""

from typing import Tuple

import numpy as np

from .utils import round_half_away


class GeometryError(ZeroDivisionError):
    """Raised for a zero-width domain."""


def affine(x: float, domain: Tuple[float, float], target: Tuple[float, float]) -> float:
    """Map ``x`` from ``domain`` onto ``target``.

    The result is rounded to two decimals and then saturated at the range
    edges, so values outside the domain land on ``target[0]`` or ``target[1]``.
    """
    d0, d1 = domain
    r0, r1 = target
    if d1 == d0:
        raise GeometryError(f"degenerate domain ({d0}, {d1})")
    y = round_half_away((r1 - r0) / (d1 - d0) * (x - d0) + r0, 2)
    return float(np.clip(y, r0, r1))
