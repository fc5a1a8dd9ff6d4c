"""Closed-form reference values for the limited processor sharing engine.

With one slot the engine is M/G/1 under preemptive shortest remaining
processing time (SRPT), which has an exact mean response time (Schrage and
Miller). For a job of size x, with ``rho(x) = lam * ∫_0^x t dF(t)``:

    E[T(x)] = lam * (∫_0^x t^2 dF(t) + x^2 (1 - F(x))) / (2 (1 - rho(x))^2)
              + ∫_0^x dt / (1 - rho(t))

Averaging the second term over x and swapping the order of integration gives
``∫_0^inf (1 - F(t)) / (1 - rho(t)) dt``, so both parts are single integrals.

With many slots there is no closed form, but at light load a job is almost
always alone and is served at ``1 / num_servers``, so its response time tends
to ``num_servers`` times its size.
"""

from __future__ import annotations

import logging

from lpssim.distributions import Distribution
from lpssim.numerics import integrate_to_infinity

logger = logging.getLogger(__name__)


def _check_stable(rho: float) -> None:
    if not 0.0 < rho < 1.0:
        raise ValueError(f"closed forms need 0 < rho < 1, got {rho!r}")


def mm1_mean_response_time(rho: float) -> float:
    """M/M/1 FCFS (and processor sharing) mean sojourn time, unit mean size."""
    _check_stable(rho)
    return 1.0 / (1.0 - rho)


def srpt_mean_response_time(dist: Distribution, rho: float, tol: float = 1e-9) -> float:
    """Mean response time of M/G/1-SRPT with arrival rate ``rho``.

    This is what ``simulate(1, n, dist, rho, seed)`` estimates as n grows.
    Job sizes follow ``dist.phases()``.
    """
    _check_stable(rho)
    lam = rho

    def load_below(x: float) -> float:
        return lam * dist.partial_moment(x, 1)

    def waiting(x: float) -> float:
        survival = 1.0 - dist.cdf(x)
        busy = 1.0 - load_below(x)
        numerator = lam * (dist.partial_moment(x, 2) + x * x * survival)
        return dist.pdf(x) * numerator / (2.0 * busy * busy)

    def residence(t: float) -> float:
        return (1.0 - dist.cdf(t)) / (1.0 - load_below(t))

    waiting_part, waiting_err = integrate_to_infinity(waiting, tol=tol)
    residence_part, residence_err = integrate_to_infinity(residence, tol=tol)
    logger.debug(
        "SRPT reference: rho=%.6f waiting=%.6f (err %.2e) residence=%.6f (err %.2e)",
        rho,
        waiting_part,
        waiting_err,
        residence_part,
        residence_err,
    )
    return waiting_part + residence_part


def lone_job_response_time(dist: Distribution, num_servers: int) -> float:
    """Light-load limit of the engine: a lone job served at 1 / num_servers."""
    if num_servers < 1:
        raise ValueError(f"num_servers must be >= 1, got {num_servers!r}")
    return num_servers * dist.mean()
