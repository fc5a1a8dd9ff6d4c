"""Job-size and inter-arrival distributions.

``Distribution`` is a closed union of variants. A new family is added as a
new dataclass and a new member of the union, not by subclassing.
"""

from lpssim.distributions.exponential import Exponential
from lpssim.distributions.hyperexponential import Hyperexponential
from lpssim.distributions.parsing import (
    Distribution,
    format_distribution,
    parse_distribution,
)

__all__ = [
    "Distribution",
    "Exponential",
    "Hyperexponential",
    "format_distribution",
    "parse_distribution",
]
