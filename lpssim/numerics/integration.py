"""Adaptive Simpson quadrature.

Pure Python, so the closed-form references in lpssim.theory need no scipy.
The integrands there are smooth and decay exponentially, which suits
Simpson's rule with interval halving.
"""

from __future__ import annotations

from collections.abc import Callable


def _simpson(fa: float, fm: float, fb: float, width: float) -> float:
    return width / 6.0 * (fa + 4.0 * fm + fb)


def integrate_adaptive_simpson(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = 1e-10,
    max_depth: int = 50,
) -> tuple[float, float]:
    """Integrate ``f`` over [a, b] with adaptive Simpson's rule.

    Intervals are halved until the Simpson estimates of the two halves agree
    with the whole to within the interval's share of ``tol``. Each accepted
    interval gets a Richardson correction.

    Args:
        f: Function to integrate.
        a: Lower bound.
        b: Upper bound.
        tol: Absolute error tolerance.
        max_depth: Maximum number of halvings of any interval.

    Returns:
        Tuple of (integral_value, error_estimate).
    """
    if a == b:
        return 0.0, 0.0
    if a > b:
        value, error = integrate_adaptive_simpson(f, b, a, tol, max_depth)
        return -value, error

    fa, fb = f(a), f(b)
    fm = f((a + b) / 2.0)
    # (a, b, fa, fm, fb, whole, tol, depth)
    pending = [(a, b, fa, fm, fb, _simpson(fa, fm, fb, b - a), tol, 0)]
    total = 0.0
    error = 0.0

    while pending:
        lo, hi, flo, fmid, fhi, whole, local_tol, depth = pending.pop()
        mid = (lo + hi) / 2.0
        flm = f((lo + mid) / 2.0)
        frm = f((mid + hi) / 2.0)
        left = _simpson(flo, flm, fmid, mid - lo)
        right = _simpson(fmid, frm, fhi, hi - mid)
        correction = (left + right - whole) / 15.0

        if depth >= max_depth or abs(correction) < local_tol:
            total += left + right + correction
            error += abs(correction)
        else:
            pending.append((lo, mid, flo, flm, fmid, left, local_tol / 2.0, depth + 1))
            pending.append((mid, hi, fmid, frm, fhi, right, local_tol / 2.0, depth + 1))

    return total, error


def integrate_to_infinity(
    f: Callable[[float], float],
    a: float = 0.0,
    tol: float = 1e-10,
    max_depth: int = 50,
) -> tuple[float, float]:
    """Integrate ``f`` over [a, inf).

    Maps the half line onto [0, 1) with ``x = a + t / (1 - t)``, so
    ``dx = dt / (1 - t)**2``. The integrand must decay fast enough that
    ``f(x) * (1 + x - a)**2`` tends to 0; the endpoint t = 1 is taken as 0.
    """

    def mapped(t: float) -> float:
        if t >= 1.0:
            return 0.0
        u = 1.0 - t
        return f(a + t / u) / (u * u)

    return integrate_adaptive_simpson(mapped, 0.0, 1.0, tol, max_depth)
