"""
Bracketing utilities: interval checks, searching for a bracket around a
starting guess and forcing an approximate root onto a chosen side of
the true root.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from pyzeros.solve.exception import (InvalidIntervalError,
                                     NotBracketingError, NullFunctionError)

if TYPE_CHECKING:
    from pyzeros.solve.base import (AllowedSolution,
                                    BracketedUnivariateSolver)

# Written by Eric J. Whitney, January 2023.


# ======================================================================

def midpoint(a: float, b: float) -> float:
    """Return the midpoint of `a` and `b`."""
    return (a + b) * 0.5


def is_sequence(lo: float, mid: float, hi: float) -> bool:
    """Returns `True` if ``lo < mid < hi``."""
    return (lo < mid) and (mid < hi)


def is_bracketing(f: Callable[[float], float], lo: float,
                  hi: float) -> bool:
    """
    Returns `True` if ``f(lo)`` and ``f(hi)`` have opposite signs, or
    either is exactly zero.

    Raises
    ------
    NullFunctionError
        If `f` is `None`.
    """
    if f is None:
        raise NullFunctionError()

    f_lo, f_hi = f(lo), f(hi)
    return (f_lo >= 0 and f_hi <= 0) or (f_lo <= 0 and f_hi >= 0)


def verify_interval(lo: float, hi: float):
    """
    Raises
    ------
    InvalidIntervalError
        If ``lo >= hi``.
    """
    # Note: NaN endpoints fail here as well.
    if not lo < hi:
        raise InvalidIntervalError(lo, hi)


def verify_sequence(lo: float, mid: float, hi: float):
    """
    Raises
    ------
    InvalidIntervalError
        Unless ``lo < mid < hi``.
    """
    verify_interval(lo, mid)
    verify_interval(mid, hi)


def verify_bracketing(f: Callable[[float], float], lo: float, hi: float):
    """
    Check that [`lo`, `hi`] is an interval that brackets a root of `f`.

    Raises
    ------
    NullFunctionError
        If `f` is `None`.
    InvalidIntervalError
        If ``lo >= hi``.
    NotBracketingError
        If `f` does not change sign over the interval.
    """
    if f is None:
        raise NullFunctionError()

    verify_interval(lo, hi)
    if not is_bracketing(f, lo, hi):
        raise NotBracketingError(lo, hi, f(lo), f(hi))


# ----------------------------------------------------------------------

def bracket(f: Callable[[float], float], initial: float,
            lower_bound: float, upper_bound: float, *, q: float = 1.0,
            r: float = 1.0,
            max_iterations: int = sys.maxsize) -> tuple[float, float]:
    r"""
    Search for an interval (`a`, `b`) bracketing a root of `f` by
    expanding a window symmetrically about `initial`.

    At step `k` the window is :math:`[initial - δ_k, initial + δ_k]`
    with :math:`δ_{k+1} = r δ_k + q` and :math:`δ_0 = 0`, clipped to
    [`lower_bound`, `upper_bound`].  The search stops when a sign change
    is found, either across the first window or between an edge and its
    previous position.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function.
    initial : float
        Centre of the search, with ``lower_bound < initial <
        upper_bound``.
    lower_bound, upper_bound : float
        Limits of the search (may be infinite).
    q : float, default = 1.0
        Additive growth of the half-width, ``q > 0``.
    r : float, default = 1.0
        Multiplicative growth of the half-width.  The default values
        give linear growth, ``r > 1`` gives geometric growth.
    max_iterations : int, default = sys.maxsize
        Maximum number of window expansions, ``> 0``.

    Returns
    -------
    a, b : float, float
        `x`-values bracketing the root, with ``a < b``.

    Raises
    ------
    ValueError
        If ``q <= 0`` or ``max_iterations <= 0``.
    InvalidIntervalError
        If `initial` is not strictly inside the bounds.
    NotBracketingError
        If `max_iterations` is reached, or both window edges reach the
        bounds, without finding a bracket.

    Notes
    -----
    The search continues while either edge can still move, i.e. while
    ``a > lower_bound`` or ``b < upper_bound``.  Once both edges sit on
    their bounds no further information can be gained.

    Examples
    --------
    Equation :math:`y = x^2 - 3x + 2` has roots at `x` = 1 and `x` = 2:
    >>> def example_fn(x):
    ...     return x**2 - 3 * x + 2
    >>> bracket(example_fn, -2.0, -10.0, 10.0)
    (0.0, 1.0)
    """
    if f is None:
        raise NullFunctionError()
    if q <= 0:
        raise ValueError(f"Requires q > 0, got {q}.")
    if max_iterations <= 0:
        raise ValueError(f"Requires max_iterations > 0, got "
                         f"{max_iterations}.")

    verify_sequence(lower_bound, initial, upper_bound)

    a, b = initial, initial
    fa, fb = np.nan, np.nan
    δ = 0.0
    its = 0

    while its < max_iterations and (a > lower_bound or b < upper_bound):
        a_prev, fa_prev = a, fa
        b_prev, fb_prev = b, fb

        δ = r * δ + q
        a = max(initial - δ, lower_bound)
        b = min(initial + δ, upper_bound)
        fa, fb = f(a), f(b)

        if its == 0:
            if fa * fb <= 0:
                return a, b

        elif fa * fa_prev <= 0:
            return a, a_prev

        elif fb * fb_prev <= 0:
            return b_prev, b

        its += 1

    raise NotBracketingError(a, b, fa, fb, details="Bracket search "
                             "failed.", iterations=its)


# ----------------------------------------------------------------------

def force_side(max_eval: int, f: Callable[[float], float],
               bracketing: BracketedUnivariateSolver, base_root: float,
               lo: float, hi: float, allowed: AllowedSolution) -> float:
    """
    Force a root found by a non-bracketing solver onto a chosen side
    of the true root.

    A small interval is grown around `base_root` (in steps of
    ``max(absolute_accuracy, |base_root| * relative_accuracy)`` of the
    `bracketing` solver) until it brackets a sign change, then the
    `bracketing` solver is used to find the root honouring `allowed`.
    The edge that is moved depends on the local slope of `f`.

    Parameters
    ----------
    max_eval : int
        Maximum number of evaluations for the growth phase and the
        bracketing solver combined.
    f : Callable[[float], float]
        Scalar function.
    bracketing : BracketedUnivariateSolver
        Solver used for the final root, supporting `allowed`.
    base_root : float
        Approximate root.
    lo, hi : float
        Limits on the growth of the interval.
    allowed : AllowedSolution
        Required side.  ``ANY_SIDE`` returns `base_root` unchanged.

    Returns
    -------
    float
        Root on the required side.

    Raises
    ------
    NotBracketingError
        If the evaluation budget is exhausted before a bracket is
        found.
    """
    from pyzeros.solve.base import AllowedSolution

    if allowed == AllowedSolution.ANY_SIDE:
        return base_root

    step = max(bracketing.absolute_accuracy,
               abs(base_root * bracketing.relative_accuracy))
    x_lo = max(lo, base_root - step)
    f_lo = f(x_lo)
    x_hi = min(hi, base_root + step)
    f_hi = f(x_hi)
    remaining = max_eval - 2

    while remaining > 0:
        if (f_lo >= 0 and f_hi <= 0) or (f_lo <= 0 and f_hi >= 0):
            return bracketing.solve(remaining, f, x_lo, x_hi, base_root,
                                    allowed=allowed)

        # Move the edge heading towards zero; move both on a plateau.
        change_lo, change_hi = False, False
        if f_lo < f_hi:
            if f_lo >= 0:
                change_lo = True
            else:
                change_hi = True

        elif f_lo > f_hi:
            if f_lo <= 0:
                change_lo = True
            else:
                change_hi = True

        else:
            change_lo, change_hi = True, True

        if change_lo:
            x_lo = max(lo, x_lo - step)
            f_lo = f(x_lo)
            remaining -= 1

        if change_hi:
            x_hi = min(hi, x_hi + step)
            f_hi = f(x_hi)
            remaining -= 1

    raise NotBracketingError(x_lo, x_hi, f_lo, f_hi,
                             details="Failed to bracket the root within "
                                     "the evaluation budget.",
                             fevals=max_eval - remaining,
                             max_eval=max_eval, base_root=base_root)
