"""Exponentially distributed job sizes and inter-arrival gaps.

The exponential distribution is memoryless: the remaining work of a job that
has already received service is distributed like a fresh job. The engine also
uses it for inter-arrival gaps, with rate ``rho``.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from lpssim.distributions.mixture import (
    Phases,
    mixture_cdf,
    mixture_partial_moment,
    mixture_pdf,
)


def check_rate(name: str, rate: float) -> None:
    """Raise ValueError unless ``rate`` is a positive finite number."""
    if not (rate > 0 and math.isfinite(rate)):
        raise ValueError(f"{name} must be a positive finite rate, got {rate!r}")


@dataclass(frozen=True)
class Exponential:
    """Exponential distribution with the given rate (mean ``1 / rate``)."""

    rate: float

    def __post_init__(self):
        check_rate("rate", self.rate)

    @classmethod
    def from_mean(cls, mean: float) -> Exponential:
        if not (mean > 0 and math.isfinite(mean)):
            raise ValueError(f"mean must be positive and finite, got {mean!r}")
        return cls(1.0 / mean)

    def sample(self, rng: random.Random) -> float:
        return rng.expovariate(self.rate)

    def mean(self) -> float:
        return 1.0 / self.rate

    def phases(self) -> Phases:
        return ((1.0, self.rate),)

    def cdf(self, x: float) -> float:
        return mixture_cdf(self.phases(), x)

    def pdf(self, x: float) -> float:
        return mixture_pdf(self.phases(), x)

    def partial_moment(self, x: float, k: int) -> float:
        return mixture_partial_moment(self.phases(), x, k)
