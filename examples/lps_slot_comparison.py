"""Compare limited processor sharing with 1, 2 and 4 slots.

Each slot count divides the same unit of capacity, so more slots mean more
jobs progress at once but each one more slowly. At light load a job is
usually alone and the extra slots are pure loss: its response time tends to
``num_servers`` times its size. Near saturation, sharing lets short jobs slip
past long ones and the gap narrows or reverses, especially for
high-variance sizes.

## What is simulated

```
    arrivals (Poisson, rate rho)
          │
          ▼
    ┌───────────────────────────────┐
    │ active jobs, sorted by        │
    │ remaining work                │
    │  ┌──────┬──────┬─────┬──────┐ │   first k = min(slots, jobs)
    │  │ 0.12 │ 0.40 │ ... │ 3.10 │ │   are in service, each at
    │  └──────┴──────┴─────┴──────┘ │   rate 1 / slots
    └───────────────────────────────┘
          │
          ▼
    completions (response time recorded)
```

With one slot the result is checked against the exact M/G/1-SRPT value.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from lpssim import (
    SweepConfig,
    enable_console_logging,
    parse_distribution,
    run_sweep,
)
from lpssim.config import BALANCED_HYPEREXP
from lpssim.plotting import plot_sweep

SLOT_COUNTS = (1, 2, 4)
RHOS = (0.1, 0.3, 0.5, 0.7, 0.8, 0.9)


def run_comparison(num_jobs: int, seed: int, dist_text: str) -> pd.DataFrame:
    """Sweep every slot count and stack the results with a ``num_servers`` column."""
    frames = []
    for num_servers in SLOT_COUNTS:
        config = SweepConfig(
            num_servers=num_servers,
            num_jobs=num_jobs,
            seed=seed,
            dist=parse_distribution(dist_text),
            rhos=RHOS,
        )
        frame = run_sweep(config)
        frame.insert(0, "num_servers", num_servers)
        frames.append(frame)
    return pd.concat(frames, ignore_index=True)


def print_summary(results: pd.DataFrame) -> None:
    table = results.pivot(index="rho", columns="num_servers", values="mean_response_time")
    single = results[results["num_servers"] == 1].set_index("rho")["srpt_reference"]

    print("\n" + "=" * 70)
    print("MEAN RESPONSE TIME BY SLOT COUNT")
    print("=" * 70)
    header = "  rho   " + "".join(f"{f'k={k}':>12}" for k in table.columns) + f"{'SRPT exact':>14}"
    print(header)
    for rho, row in table.iterrows():
        cells = "".join(f"{value:>12.4f}" for value in row)
        print(f"  {rho:<6}{cells}{single[rho]:>14.4f}")
    print("=" * 70)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Limited processor sharing slot comparison")
    parser.add_argument("--jobs", type=int, default=200_000, help="Completions per point")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--dist", default=BALANCED_HYPEREXP, help="Job-size distribution")
    parser.add_argument("--output", default="output/lps_slot_comparison", help="Output dir")
    parser.add_argument("--no-viz", action="store_true", help="Skip visualization")
    args = parser.parse_args()

    enable_console_logging(level="INFO")

    results = run_comparison(args.jobs, args.seed, args.dist)
    print_summary(results)

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    results.to_csv(output_dir / "results.csv", index=False)

    if not args.no_viz:
        for num_servers, frame in results.groupby("num_servers"):
            path = plot_sweep(
                frame,
                output_dir / f"slots_{num_servers}.png",
                title=f"{num_servers} slot(s), {args.dist}",
            )
            print(f"Saved: {path}")
