"""Plot a rho sweep: simulated mean response time against utilization."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from lpssim.sweep import MEAN_RESPONSE_TIME, RHO, SRPT_REFERENCE


def plot_sweep(frame: pd.DataFrame, path: str | Path, title: str | None = None) -> Path:
    """Save a line plot of ``frame`` to ``path`` and return the path.

    The SRPT reference curve is drawn only where the sweep has one.
    """
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(frame[RHO], frame[MEAN_RESPONSE_TIME], "o-", markersize=3, label="Simulated")

    reference = frame.dropna(subset=[SRPT_REFERENCE])
    if not reference.empty:
        ax.plot(reference[RHO], reference[SRPT_REFERENCE], "k--", label="M/G/1-SRPT (exact)")

    ax.set_xlabel("Utilization (rho)")
    ax.set_ylabel("Mean response time")
    ax.set_yscale("log")
    ax.set_title(title or "Limited processor sharing: mean response time vs load")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path
