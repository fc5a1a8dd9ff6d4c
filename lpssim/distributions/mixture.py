"""Closed-form functions of a weighted mixture of exponential phases.

Both job-size variants are mixtures of exponentials, described by
``((weight, rate), ...)`` tuples. The helpers here give the CDF, density and
partial moments that the M/G/1-SRPT reference formula integrates over.
"""

from __future__ import annotations

import math

Phases = tuple[tuple[float, float], ...]


def mixture_cdf(phases: Phases, x: float) -> float:
    if x <= 0:
        return 0.0
    return sum(w * -math.expm1(-rate * x) for w, rate in phases)


def mixture_pdf(phases: Phases, x: float) -> float:
    if x < 0:
        return 0.0
    return sum(w * rate * math.exp(-rate * x) for w, rate in phases)


def mixture_partial_moment(phases: Phases, x: float, k: int) -> float:
    """Return the partial moment ``∫_0^x t^k dF(t)`` for k = 1 or 2."""
    if k not in (1, 2):
        raise ValueError(f"partial moment order must be 1 or 2, got {k}")
    if x <= 0:
        return 0.0

    total = 0.0
    for w, rate in phases:
        rx = rate * x
        tail = math.exp(-rx)
        if k == 1:
            total += w * (1.0 - tail * (1.0 + rx)) / rate
        else:
            total += w * (2.0 - tail * (rx * rx + 2.0 * rx + 2.0)) / (rate * rate)
    return total
