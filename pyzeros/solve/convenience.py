"""
Convenience functions for solving scalar equations in one call, without
setting up a solver object.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import Enum

from pyzeros.solve.base import UnivariateSolver
from pyzeros.solve.bisection import BisectionSolver
from pyzeros.solve.brent import BrentSolver
from pyzeros.solve.muller import MullerSolver
from pyzeros.solve.ridders import RiddersSolver
from pyzeros.solve.secant import (IllinoisSolver, PegasusSolver,
                                  RegulaFalsiSolver, SecantSolver)

# Written by Eric J. Whitney, May 2024.

# Function values this close to zero are treated as zero by solve_multi.
_ZERO_TOL = 1e-9


# ======================================================================

class SolverType(Enum):
    """Algorithms available to `solve_root` and `solve_multi`."""
    BRENT = 0
    BISECTION = 1
    SECANT = 2
    REGULA_FALSI = 3
    ILLINOIS = 4
    PEGASUS = 5
    RIDDERS = 6
    MULLER = 7


_SOLVER_CLASSES = {
    SolverType.BRENT: BrentSolver,
    SolverType.BISECTION: BisectionSolver,
    SolverType.SECANT: SecantSolver,
    SolverType.REGULA_FALSI: RegulaFalsiSolver,
    SolverType.ILLINOIS: IllinoisSolver,
    SolverType.PEGASUS: PegasusSolver,
    SolverType.RIDDERS: RiddersSolver,
    SolverType.MULLER: MullerSolver,
}


# ----------------------------------------------------------------------

def make_solver(solver_type: SolverType = SolverType.BRENT,
                absolute_accuracy: float = None) -> UnivariateSolver:
    """
    Return a new solver of the given type, using default accuracies
    except for `absolute_accuracy` (if given).

    Raises
    ------
    ValueError
        If `solver_type` is unknown.
    """
    try:
        solver_class = _SOLVER_CLASSES[solver_type]
    except KeyError:
        raise ValueError(f"Unknown solver type: {solver_type}.") from None

    return solver_class(absolute_accuracy)


def solve_root(f: Callable[[float], float], lo: float, hi: float,
               solver_type: SolverType = SolverType.BRENT,
               absolute_accuracy: float = None,
               max_eval: int = sys.maxsize) -> float:
    """
    Find a zero of `f` on [`lo`, `hi`] using a new solver of type
    `solver_type`.  Exceptions are as per `UnivariateSolver.solve`.

    Examples
    --------
    >>> x = solve_root(lambda x: x**2 - 2, 0.0, 2.0,
    ...                absolute_accuracy=1e-9)
    >>> round(x, 6)
    1.414214
    """
    return make_solver(solver_type, absolute_accuracy).solve(max_eval, f,
                                                             lo, hi)


# ----------------------------------------------------------------------

def solve_multi(nth_f: Callable[[int], Callable[[float], float]],
                lo: float, hi: float, max_zeros: int,
                solver_type: SolverType = SolverType.BRENT,
                max_eval: int = 1000) -> list[float]:
    """
    Find all zeros of a smooth function on [`lo`, `hi`] using its
    derivatives.

    Between consecutive zeros of :math:`f^{(k+1)}` the derivative
    :math:`f^{(k)}` is monotonic, so it has at most one zero there.
    Starting from the highest derivative, the zeros at each level are
    found on these sub-intervals and used to split the interval for the
    next lower level.

    Parameters
    ----------
    nth_f : Callable[[int], Callable[[float], float]]
        Returns the `n`-th derivative of the function when called as
        ``nth_f(n)``, with ``nth_f(0)`` giving the function itself.
    lo, hi : float
        Search interval.
    max_zeros : int
        Maximum number of zeros expected.  Derivatives up to order
        `max_zeros` are used, e.g. the degree of a polynomial.
    solver_type : SolverType, default = BRENT
        Solver used on each sub-interval.
    max_eval : int, default = 1000
        Evaluation budget for each sub-interval.

    Returns
    -------
    list[float]
        Zeros in increasing order.  Interior points where the function
        is within 1e-9 of zero are included.

    Examples
    --------
    >>> from numpy.polynomial import Polynomial
    >>> p = Polynomial.fromroots([-3.0, 1.0, 2.0])
    >>> zeros = solve_multi(p.deriv, -4.0, 4.0, 3)
    >>> [round(x, 4) for x in zeros]
    [-3.0, 1.0, 2.0]
    """
    # Split the interval using the zeros of each derivative in turn.
    points = [lo, hi]
    for order in range(max_zeros, 0, -1):
        f = nth_f(order)
        x_a, f_a = points[0], f(points[0])
        new_points = [x_a]
        for x_b in points[1:]:
            f_b = f(x_b)
            if _sign(f_a) * _sign(f_b) < 0:
                new_points.append(solve_root(f, x_a, x_b, solver_type,
                                             max_eval=max_eval))
            if abs(f_b) <= _ZERO_TOL:
                new_points.append(x_b)

            x_a, f_a = x_b, f_b

        if abs(new_points[-1] - x_a) > _ZERO_TOL:
            new_points.append(x_a)

        points = new_points

    # Zeros of the function itself.
    f = nth_f(0)
    x_a, f_a = points[0], f(points[0])
    zeros = [x_a] if abs(f_a) <= _ZERO_TOL else []
    for x_b in points[1:]:
        f_b = f(x_b)
        if _sign(f_a) * _sign(f_b) < 0:
            zeros.append(solve_root(f, x_a, x_b, solver_type,
                                    max_eval=max_eval))
        if abs(f_b) <= _ZERO_TOL:
            zeros.append(x_b)

        x_a, f_a = x_b, f_b

    return zeros


def _sign(y: float) -> int:
    # Sign with a small dead zone around zero.
    if y > _ZERO_TOL:
        return 1
    elif y < -_ZERO_TOL:
        return -1
    return 0
