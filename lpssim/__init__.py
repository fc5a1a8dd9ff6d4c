"""lpssim: mean response time of a limited processor sharing queue.

Jobs with the least remaining work hold up to ``num_servers`` slots, each
served at ``1 / num_servers``. ``simulate`` estimates the long-run mean
response time for one configuration; ``run_sweep`` repeats it across
utilizations.

lpssim is silent by default. Enable logging with one of:
    lpssim.enable_console_logging(level="DEBUG")
    lpssim.enable_file_logging("lpssim.log")
    lpssim.configure_from_env()  # reads LPSSIM_LOGGING, LPSSIM_LOG_FILE, LPSSIM_LOG_JSON
"""

import logging

logging.getLogger("lpssim").addHandler(logging.NullHandler())

from lpssim.config import SweepConfig
from lpssim.core import (
    EPSILON,
    Job,
    LimitedProcessorSharing,
    RunState,
    SimulationResult,
    StepKind,
    StepOutcome,
    simulate,
)
from lpssim.distributions import (
    Distribution,
    Exponential,
    Hyperexponential,
    format_distribution,
    parse_distribution,
)
from lpssim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)
from lpssim.sweep import run_sweep
from lpssim.theory import (
    lone_job_response_time,
    mm1_mean_response_time,
    srpt_mean_response_time,
)

__all__ = [
    # Engine
    "EPSILON",
    "Job",
    "LimitedProcessorSharing",
    "RunState",
    "SimulationResult",
    "StepKind",
    "StepOutcome",
    "simulate",
    # Distributions
    "Distribution",
    "Exponential",
    "Hyperexponential",
    "format_distribution",
    "parse_distribution",
    # Sweep
    "SweepConfig",
    "run_sweep",
    # Closed forms
    "lone_job_response_time",
    "mm1_mean_response_time",
    "srpt_mean_response_time",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
]
