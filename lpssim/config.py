"""Sweep configuration and the fixed parameter tables.

The defaults reproduce the reference sweep: two slots, ten million jobs per
point, seed 0, exponential job sizes written as a degenerate hyperexponential,
over a rho grid that is dense near saturation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral

from lpssim.core import check_config
from lpssim.distributions import Distribution, parse_distribution

DEFAULT_RHOS: tuple[float, ...] = (
    0.01, 0.05, 0.1, 0.15, 0.2, 0.25, 0.3, 0.35, 0.4, 0.45, 0.5, 0.55, 0.6, 0.65,
    0.7, 0.72, 0.74, 0.76, 0.78, 0.8, 0.82, 0.84, 0.86, 0.88, 0.9, 0.903, 0.906,
    0.91, 0.913, 0.916, 0.92, 0.923, 0.926, 0.93, 0.933, 0.936, 0.94, 0.943,
    0.946, 0.95, 0.953, 0.956, 0.96, 0.97, 0.973, 0.976, 0.98, 0.983, 0.986,
    0.99, 0.993, 0.996,
)

DEFAULT_SEED = 0
DEFAULT_NUM_JOBS = 10_000_000
DEFAULT_NUM_SERVERS = 2

# Hyperexp(1, 1, 1) is Exponential(1) written in hyperexponential form.
DEFAULT_DISTRIBUTION = "hyperexp:1,1,1"
# Mean 1, squared coefficient of variation 1.5.
BALANCED_HYPEREXP = "hyperexp:2,0.6666666666666666,0.5"


@dataclass(frozen=True)
class SweepConfig:
    """One sweep: a fixed system, seed and job count over several rho values."""

    num_servers: int = DEFAULT_NUM_SERVERS
    num_jobs: int = DEFAULT_NUM_JOBS
    seed: int = DEFAULT_SEED
    dist: Distribution = parse_distribution(DEFAULT_DISTRIBUTION)
    rhos: tuple[float, ...] = DEFAULT_RHOS

    def validate(self) -> None:
        """Raise ValueError unless every run of the sweep could start.

        Runs the engine's own argument checks for each rho, so a sweep never
        fails part way through on a bad setting.
        """
        if isinstance(self.num_jobs, bool) or not isinstance(self.num_jobs, Integral) or self.num_jobs < 1:
            raise ValueError(f"num_jobs must be an integer >= 1, got {self.num_jobs!r}")
        if not self.rhos:
            raise ValueError("at least one rho is required")
        for rho in self.rhos:
            check_config(self.num_servers, self.dist, rho, self.seed)

    @classmethod
    def from_args(
        cls,
        *,
        num_servers: int = DEFAULT_NUM_SERVERS,
        num_jobs: int = DEFAULT_NUM_JOBS,
        seed: int = DEFAULT_SEED,
        dist: str = DEFAULT_DISTRIBUTION,
        rhos: Sequence[float] | None = None,
    ) -> SweepConfig:
        """Build and validate a config from command-line style values."""
        config = cls(
            num_servers=num_servers,
            num_jobs=num_jobs,
            seed=seed,
            dist=parse_distribution(dist),
            rhos=tuple(rhos) if rhos else DEFAULT_RHOS,
        )
        config.validate()
        return config
