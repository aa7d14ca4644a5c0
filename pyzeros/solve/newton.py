from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.polynomial import Polynomial

from pyzeros.solve.base import UnivariateSolver
from pyzeros.solve.exception import (InvalidIntervalError,
                                     ZeroDerivativeError)
from pyzeros.util.print_styles import val2str


# Written by Eric J. Whitney, May 2024.


# ======================================================================

class DifferentiableFunction:
    """
    Scalar function :math:`y = f(x)` together with one or more of its
    derivatives.  Calling the object gives `f(x)`; `derivative(x, n)`
    gives :math:`d^{n}f/dx^n`.

    Parameters
    ----------
    func : Callable[[float], float]
        The function :math:`f(x)`.
    derivs : Callable[[float], float]
        Derivative functions in increasing order, i.e. the first is
        :math:`df/dx`, the second :math:`d^2f/dx^2` and so on.

    Examples
    --------
    >>> f = DifferentiableFunction(lambda x: x**3, lambda x: 3 * x**2)
    >>> f(2.0), f.derivative(2.0)
    (8.0, 12.0)
    """

    def __init__(self, func: Callable[[float], float],
                 *derivs: Callable[[float], float]):
        self._func = func
        self._derivs = derivs

    def __call__(self, x: float) -> float:
        return self._func(x)

    @classmethod
    def from_polynomial(cls, p: Polynomial) -> DifferentiableFunction:
        """Construct using `p` and all of its non-trivial derivatives."""
        derivs = [p.deriv(m) for m in range(1, max(p.degree(), 1) + 1)]
        return cls(p, *derivs)

    @property
    def max_order(self) -> int:
        """Highest order of derivative available."""
        return len(self._derivs)

    def derivative(self, x: float, n: int = 1) -> float:
        """
        Return the `n`-th derivative at `x`.

        Raises
        ------
        ValueError
            If ``n < 1`` or the derivative was not supplied.
        """
        if not 1 <= n <= len(self._derivs):
            raise ValueError(f"Derivative order must be in 1..."
                             f"{len(self._derivs)}, got {n}.")
        return self._derivs[n - 1](x)


# ======================================================================

class NewtonRaphsonSolver(UnivariateSolver):
    """
    Newton-Raphson method on a differentiable function.

    The function passed to `solve()` must be callable and also provide
    ``derivative(x, n=1)``, e.g. a `DifferentiableFunction`.  A
    `numpy.polynomial.Polynomial` is also accepted directly.

    The iteration starts at `start_value` (or the midpoint of the
    interval, if only an interval is given) and stops when successive
    steps are within `absolute_accuracy`.  The interval is not used to
    restrict the steps, so the solution may lie outside it, and
    convergence is not guaranteed.
    Omitting both the interval and `start_value` raises
    `InvalidIntervalError`.

    Each step costs one evaluation (value plus derivative).

    Examples
    --------
    >>> solver = NewtonRaphsonSolver(absolute_accuracy=1e-12)
    >>> f = DifferentiableFunction(lambda x: x**2 - 2, lambda x: 2 * x)
    >>> round(solver.solve(50, f, start_value=1.0), 12)
    1.414213562373
    """

    def solve(self, max_eval: int, f: Callable[[float], float],
              lo: float = np.nan, hi: float = np.nan,
              start_value: float = None) -> float:
        """
        As per `UnivariateSolver.solve`.  Either an interval or a
        `start_value` (or both) is required.

        Raises
        ------
        TypeError
            If `f` does not provide `derivative`.
        ZeroDerivativeError
            If a step reaches a point where the derivative is zero.
        """
        if isinstance(f, Polynomial):
            f = DifferentiableFunction.from_polynomial(f)

        if f is not None and not callable(getattr(f, 'derivative', None)):
            raise TypeError(f"{type(self).__name__} requires a function "
                            f"providing derivative(x, n).")

        return super().solve(max_eval, f, lo, hi, start_value)

    def _compute_objective_value_and_derivative(
            self, x: float) -> tuple[float, float]:
        # Value and derivative are charged as a single evaluation.
        self._increment_evaluation_count()
        y, dy = self._function(x), self._function.derivative(x, 1)
        if self.display_level >= 2:
            self.pstyles.print('Solver_2', f"Evaluation {self.evaluations}: "
                                           f"f({val2str(x)}) = {val2str(y)}, "
                                           f"f' = {val2str(dy)}")
        return y, dy

    def _do_solve(self) -> float:
        atol = self.absolute_accuracy
        x0 = self.start_value
        if np.isnan(x0):
            raise InvalidIntervalError(self.min, self.max)  # No start.

        while True:
            y0, dy0 = self._compute_objective_value_and_derivative(x0)
            if y0 == 0.0:
                return x0
            if dy0 == 0.0:
                raise ZeroDerivativeError(x0)

            x1 = x0 - y0 / dy0
            if abs(x1 - x0) <= atol:
                return x1

            x0 = x1
