"""Command-line driver: sweep rho values and print one line per result.

Example:
    python -m lpssim --servers 1 --jobs 100000 --dist exp --rho 0.5 --rho 0.9
"""

from __future__ import annotations

import argparse
import logging
import sys

from lpssim.config import (
    DEFAULT_DISTRIBUTION,
    DEFAULT_NUM_JOBS,
    DEFAULT_NUM_SERVERS,
    DEFAULT_SEED,
    SweepConfig,
)
from lpssim.logging_config import configure_from_env, enable_console_logging
from lpssim.plotting import plot_sweep
from lpssim.sweep import format_header, format_line, run_sweep

logger = logging.getLogger(__name__)


def _emit(rho: float, mean_response_time: float) -> None:
    print(format_line(rho, mean_response_time), flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lpssim",
        description="Mean response time of a limited processor sharing queue",
    )
    parser.add_argument("--servers", type=int, default=DEFAULT_NUM_SERVERS, help="Service slots")
    parser.add_argument("--jobs", type=int, default=DEFAULT_NUM_JOBS, help="Completions per rho")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument(
        "--dist",
        default=DEFAULT_DISTRIBUTION,
        help="Job sizes: exp, exp:RATE or hyperexp:LOW,HIGH,PROB (mean must be 1)",
    )
    parser.add_argument(
        "--rho",
        type=float,
        action="append",
        help="Utilization to simulate; repeat for several (default: built-in table)",
    )
    parser.add_argument("--csv", help="Also write the results table to this CSV file")
    parser.add_argument("--plot", help="Also save a response-time plot to this image file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log to stderr at this level (overrides LPSSIM_LOGGING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    try:
        config = SweepConfig.from_args(
            num_servers=args.servers,
            num_jobs=args.jobs,
            seed=args.seed,
            dist=args.dist,
            rhos=args.rho,
        )
        print(format_header(config), flush=True)
        frame = run_sweep(config, on_result=_emit)
    except ValueError as exc:
        parser.error(str(exc))

    if args.csv:
        frame.to_csv(args.csv, index=False)
        logger.info("Wrote %s", args.csv)
    if args.plot:
        plot_sweep(frame, args.plot)
        logger.info("Wrote %s", args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
