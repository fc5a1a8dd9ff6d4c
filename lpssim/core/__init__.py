"""Event-driven engine for the limited processor sharing queue."""

from lpssim.core.engine import (
    EPSILON,
    LimitedProcessorSharing,
    RunState,
    SimulationResult,
    StepKind,
    StepOutcome,
    check_config,
    simulate,
)
from lpssim.core.job import Job

__all__ = [
    "EPSILON",
    "Job",
    "LimitedProcessorSharing",
    "RunState",
    "SimulationResult",
    "StepKind",
    "StepOutcome",
    "check_config",
    "simulate",
]
