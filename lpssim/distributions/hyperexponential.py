"""Two-phase hyperexponential job sizes.

A Hyperexponential is a probabilistic mixture of two exponential phases. Each
draw first picks a phase with a uniform variate, then samples an exponential
with that phase's rate. Mixing a fast and a slow phase gives job sizes with a
coefficient of variation above 1, which is where the size-based admission
rule of the engine pays off.

Phase selection compares the uniform draw against ``prob_low`` as
``low_rate if u > prob_low else high_rate``. The low-rate phase is therefore
drawn with probability ``1 - prob_low``, while ``mean()`` weights it by
``prob_low``. The two agree whenever ``prob_low`` is 0.5 or the rates are
equal, which covers the parameterizations in lpssim.config. ``phases()``
reports what ``sample`` really draws.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from lpssim.distributions.exponential import check_rate
from lpssim.distributions.mixture import (
    Phases,
    mixture_cdf,
    mixture_partial_moment,
    mixture_pdf,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hyperexponential:
    """Mixture of two exponential phases.

    Attributes:
        low_rate: Rate of the phase taken when the uniform draw exceeds
            ``prob_low``.
        high_rate: Rate of the phase taken otherwise.
        prob_low: Threshold for the phase draw, in [0, 1].
    """

    low_rate: float
    high_rate: float
    prob_low: float

    def __post_init__(self):
        check_rate("low_rate", self.low_rate)
        check_rate("high_rate", self.high_rate)
        if not 0.0 <= self.prob_low <= 1.0:
            raise ValueError(f"prob_low must be in [0, 1], got {self.prob_low!r}")
        logger.debug(
            "Hyperexponential created: low_rate=%.6f high_rate=%.6f prob_low=%.6f mean=%.6f",
            self.low_rate,
            self.high_rate,
            self.prob_low,
            self.mean(),
        )

    def sample(self, rng: random.Random) -> float:
        rate = self.low_rate if rng.random() > self.prob_low else self.high_rate
        return rng.expovariate(rate)

    def mean(self) -> float:
        return self.prob_low / self.low_rate + (1.0 - self.prob_low) / self.high_rate

    def phases(self) -> Phases:
        return ((1.0 - self.prob_low, self.low_rate), (self.prob_low, self.high_rate))

    def cdf(self, x: float) -> float:
        return mixture_cdf(self.phases(), x)

    def pdf(self, x: float) -> float:
        return mixture_pdf(self.phases(), x)

    def partial_moment(self, x: float, k: int) -> float:
        return mixture_partial_moment(self.phases(), x, k)
