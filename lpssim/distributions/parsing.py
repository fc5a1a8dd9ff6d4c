"""Text forms of job-size distributions, for the CLI and sweep headers.

Accepted forms:
    exp                     Exponential(1.0)
    exp:RATE                Exponential(RATE)
    hyperexp:LOW,HIGH,PROB  Hyperexponential(LOW, HIGH, PROB)
"""

from __future__ import annotations

from lpssim.distributions.exponential import Exponential
from lpssim.distributions.hyperexponential import Hyperexponential

Distribution = Exponential | Hyperexponential

_FORMS = "'exp', 'exp:RATE' or 'hyperexp:LOW,HIGH,PROB'"


def _floats(text: str, raw: str) -> list[float]:
    try:
        return [float(part) for part in raw.split(",")]
    except ValueError:
        raise ValueError(f"non-numeric parameter in distribution {text!r}") from None


def parse_distribution(text: str) -> Distribution:
    """Build a distribution from its text form.

    Raises:
        ValueError: For unknown names, wrong parameter counts, or parameters
            the distribution itself rejects.
    """
    name, _, raw = text.strip().partition(":")
    name = name.lower()

    if name == "exp":
        if not raw:
            return Exponential(1.0)
        params = _floats(text, raw)
        if len(params) != 1:
            raise ValueError(f"exp takes one rate, got {text!r}")
        return Exponential(params[0])

    if name == "hyperexp":
        params = _floats(text, raw) if raw else []
        if len(params) != 3:
            raise ValueError(f"hyperexp takes LOW,HIGH,PROB, got {text!r}")
        return Hyperexponential(*params)

    raise ValueError(f"unknown distribution {text!r}; expected {_FORMS}")


def format_distribution(dist: Distribution) -> str:
    """Render ``dist`` in the form parse_distribution accepts."""
    if isinstance(dist, Exponential):
        return f"exp:{dist.rate!r}"
    if isinstance(dist, Hyperexponential):
        return f"hyperexp:{dist.low_rate!r},{dist.high_rate!r},{dist.prob_low!r}"
    raise TypeError(f"not a job-size distribution: {dist!r}")
