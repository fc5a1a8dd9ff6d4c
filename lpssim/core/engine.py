"""Event-driven simulation of a limited processor sharing queue.

The system has a total service capacity of one unit of work per unit time,
split evenly across ``num_servers`` slots. At every step the jobs with the
least remaining work hold the slots, and each of them is served at
``1 / num_servers`` whether or not the other slots are occupied. With one
slot this is preemptive shortest-remaining-processing-time (SRPT); with many
slots and light load a lone job runs ``num_servers`` times slower than it
would alone on the whole machine.

Time advances directly from one event to the next. Each step:

1. sort the active jobs by remaining work,
2. find the earliest completion among the in-service prefix,
3. compare it with the next arrival (ties count as completions),
4. advance the clock and apply ``elapsed / num_servers`` to the prefix,
5. remove finished prefix jobs (scanning from the back) and record their
   response times,
6. on an arrival step, admit a new job and draw the next gap.

A run is fully determined by its arguments; all randomness comes from one
``random.Random(seed)`` owned by the run.
"""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from numbers import Integral
from operator import attrgetter

from lpssim.core.job import Job
from lpssim.distributions import Distribution, Exponential

logger = logging.getLogger(__name__)

EPSILON = 1e-8

SEED_LIMIT = 2**64

_BY_REMAINING_WORK = attrgetter("remaining_work")


class StepKind(Enum):
    """Which event ended a step."""

    ARRIVAL = auto()
    COMPLETION = auto()


@dataclass(frozen=True)
class StepOutcome:
    """What a single call to LimitedProcessorSharing.step() did.

    Attributes:
        kind: ARRIVAL if a new job was admitted, else COMPLETION.
        elapsed: Simulated time the step covered.
        clock: Clock value at the end of the step.
        completed: Number of jobs that left the system during the step.
    """

    kind: StepKind
    elapsed: float
    clock: float
    completed: int


@dataclass
class RunState:
    """Mutable state of one simulation run.

    Owned by exactly one LimitedProcessorSharing instance and never shared.
    """

    rng: random.Random
    next_arrival_time: float
    clock: float = 0.0
    num_completions: int = 0
    total_response: float = 0.0
    active: list[Job] = field(default_factory=list)
    num_arrivals: int = 0
    steps: int = 0
    peak_active: int = 0


@dataclass(frozen=True)
class SimulationResult:
    """Statistics of a finished run.

    ``wall_clock_seconds`` is excluded from equality, so two runs with the
    same arguments compare equal.
    """

    mean_response_time: float
    num_completions: int
    num_arrivals: int
    steps: int
    final_clock: float
    peak_active: int
    wall_clock_seconds: float = field(default=0.0, compare=False)


def _is_count(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_config(num_servers: int, dist: Distribution, rho: float, seed: int) -> None:
    """Raise ValueError unless a run with these arguments could start.

    Nothing is sampled. Counts and seeds may be any Integral, numpy integers
    included, but not bool.
    """
    if not _is_count(num_servers) or num_servers < 1:
        raise ValueError(f"num_servers must be an integer >= 1, got {num_servers!r}")
    if not (rho > 0 and math.isfinite(rho)):
        raise ValueError(f"rho must be positive and finite, got {rho!r}")
    if not _is_count(seed) or not 0 <= seed < SEED_LIMIT:
        raise ValueError(f"seed must be an integer in [0, 2**64), got {seed!r}")
    mean = dist.mean()
    if not abs(mean - 1.0) < EPSILON:
        raise ValueError(
            f"job-size distribution must be normalized to mean 1 (within {EPSILON}), "
            f"got mean {mean!r} for {dist!r}"
        )


class LimitedProcessorSharing:
    """Limited processor sharing queue with shortest-remaining-work admission.

    Args:
        num_servers: Number of service slots (>= 1).
        dist: Job-size distribution; its mean must be 1 within EPSILON.
        rho: Arrival rate, which equals the utilization because job sizes
            have mean 1 and total capacity is 1.
        seed: Seed of the run's random stream, in [0, 2**64).

    Raises:
        ValueError: If any argument is invalid. Nothing is sampled before
            all arguments have been checked.
    """

    def __init__(self, num_servers: int, dist: Distribution, rho: float, seed: int):
        check_config(num_servers, dist, rho, seed)
        if rho >= 1.0:
            logger.warning(
                "rho=%.6f is not below 1; the queue is unstable and the run may not finish",
                rho,
            )

        self.num_servers = int(num_servers)
        self.dist = dist
        self.rho = rho
        self.seed = int(seed)
        self._arrivals = Exponential(rho)

        rng = random.Random(self.seed)
        self.state = RunState(rng=rng, next_arrival_time=self._arrivals.sample(rng))

    def in_service(self) -> list[Job]:
        """Jobs holding a slot, assuming the active set is already sorted."""
        return self.state.active[: self.num_servers]

    def step(self) -> StepOutcome:
        """Advance the run to its next event."""
        was_arrival, elapsed, completed = self._advance()
        return StepOutcome(
            kind=StepKind.ARRIVAL if was_arrival else StepKind.COMPLETION,
            elapsed=elapsed,
            clock=self.state.clock,
            completed=completed,
        )

    def run(self, num_jobs: int) -> SimulationResult:
        """Step until ``num_jobs`` jobs have completed.

        There is no step limit: with ``rho >= 1`` this may not return.
        """
        if not _is_count(num_jobs) or num_jobs < 1:
            raise ValueError(f"num_jobs must be an integer >= 1, got {num_jobs!r}")

        logger.debug(
            "Run starting: num_servers=%d num_jobs=%d rho=%.6f seed=%d dist=%r",
            self.num_servers,
            num_jobs,
            self.rho,
            self.seed,
            self.dist,
        )
        started = time.perf_counter()

        state = self.state
        advance = self._advance
        while state.num_completions < num_jobs:
            advance()

        wall = time.perf_counter() - started
        result = SimulationResult(
            mean_response_time=state.total_response / state.num_completions,
            num_completions=state.num_completions,
            num_arrivals=state.num_arrivals,
            steps=state.steps,
            final_clock=state.clock,
            peak_active=state.peak_active,
            wall_clock_seconds=wall,
        )
        logger.debug(
            "Run finished: mean_response=%.6f steps=%d clock=%.3f peak_active=%d wall=%.3fs",
            result.mean_response_time,
            result.steps,
            result.final_clock,
            result.peak_active,
            wall,
        )
        return result

    def _advance(self) -> tuple[bool, float, int]:
        state = self.state
        active = state.active
        servers = self.num_servers

        active.sort(key=_BY_REMAINING_WORK)
        serving = self.in_service()

        # The prefix is sorted, so its head finishes first.
        next_completion = serving[0].remaining_work * servers if serving else math.inf
        elapsed = min(next_completion, state.next_arrival_time - state.clock)
        was_arrival = elapsed < next_completion

        state.clock += elapsed
        work = elapsed / servers
        for job in serving:
            job.remaining_work -= work

        completed = 0
        for i in range(len(serving) - 1, -1, -1):
            if active[i].remaining_work < EPSILON:
                job = active.pop(i)
                state.total_response += job.response_time(state.clock)
                completed += 1
        state.num_completions += completed

        if was_arrival:
            size = self.dist.sample(state.rng)
            active.append(Job(arrival_time=state.clock, remaining_work=size))
            state.num_arrivals += 1
            if len(active) > state.peak_active:
                state.peak_active = len(active)
            state.next_arrival_time = state.clock + self._arrivals.sample(state.rng)

        state.steps += 1
        return was_arrival, elapsed, completed


def simulate(num_servers: int, num_jobs: int, dist: Distribution, rho: float, seed: int) -> float:
    """Mean response time of ``num_jobs`` jobs in a limited processor sharing queue.

    Identical arguments always give a bit-identical result.

    Args:
        num_servers: Number of service slots (>= 1).
        num_jobs: Completions to observe before stopping (>= 1).
        dist: Job-size distribution with mean 1.
        rho: Utilization (arrival rate), > 0. Values >= 1 may never finish.
        seed: Seed in [0, 2**64).

    Raises:
        ValueError: If the configuration is invalid.
    """
    return LimitedProcessorSharing(num_servers, dist, rho, seed).run(num_jobs).mean_response_time
