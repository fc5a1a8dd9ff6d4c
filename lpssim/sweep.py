"""Run the engine over a list of utilizations and tabulate the results."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

import pandas as pd

from lpssim.config import SweepConfig
from lpssim.core import LimitedProcessorSharing
from lpssim.distributions import format_distribution
from lpssim.theory import srpt_mean_response_time

logger = logging.getLogger(__name__)

RHO = "rho"
MEAN_RESPONSE_TIME = "mean_response_time"
SRPT_REFERENCE = "srpt_reference"
COLUMNS = [RHO, MEAN_RESPONSE_TIME, SRPT_REFERENCE]


def _reference(config: SweepConfig, rho: float) -> float:
    if config.num_servers != 1 or rho >= 1.0:
        return math.nan
    return srpt_mean_response_time(config.dist, rho)


def run_sweep(
    config: SweepConfig,
    on_result: Callable[[float, float], None] | None = None,
) -> pd.DataFrame:
    """Simulate every rho in ``config`` in order, one run per value.

    Each run reuses the same seed, job count and distribution. The
    ``srpt_reference`` column holds the exact single-slot value when
    ``num_servers`` is 1, otherwise NaN.
    ``on_result(rho, mean_response_time)`` is called as each run finishes.
    """
    config.validate()
    rows = []
    for rho in config.rhos:
        result = LimitedProcessorSharing(
            config.num_servers, config.dist, rho, config.seed
        ).run(config.num_jobs)
        logger.info(
            "rho=%.3f mean_response=%.6f steps=%d peak_active=%d wall=%.2fs",
            rho,
            result.mean_response_time,
            result.steps,
            result.peak_active,
            result.wall_clock_seconds,
        )
        rows.append([rho, result.mean_response_time, _reference(config, rho)])
        if on_result is not None:
            on_result(rho, result.mean_response_time)
    return pd.DataFrame(rows, columns=COLUMNS)


def format_header(config: SweepConfig) -> str:
    return (
        f"num_jobs {config.num_jobs} num_servers {config.num_servers} "
        f"seed {config.seed} dist {format_distribution(config.dist)}"
    )


def format_line(rho: float, mean_response_time: float) -> str:
    return f"{float(rho)!r};{float(mean_response_time)!r};"


def format_lines(frame: pd.DataFrame) -> list[str]:
    """One ``rho;mean_response_time;`` line per row."""
    return [
        format_line(row[RHO], row[MEAN_RESPONSE_TIME])
        for row in frame[[RHO, MEAN_RESPONSE_TIME]].to_dict("records")
    ]
