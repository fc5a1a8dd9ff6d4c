"""A unit of work in the limited processor sharing system."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Job:
    """One job, from its arrival until its remaining work runs out.

    Attributes:
        arrival_time: Simulated time the job entered the system. Never
            changed after creation.
        remaining_work: Work still owed to the job. Only the engine's
            time-advance step decreases it.
    """

    arrival_time: float
    remaining_work: float

    def response_time(self, now: float) -> float:
        """Sojourn time of the job if it completes at ``now``."""
        return now - self.arrival_time
