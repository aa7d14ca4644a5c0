from pyzeros.solve.base import UnivariateSolver
from pyzeros.solve.bracket import midpoint


# Written by Eric J. Whitney, January 2022.


# ======================================================================

class BisectionSolver(UnivariateSolver):
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [x_{min}, x_{max}]` by the bisection method.  For bisection to work
    :math:`f(x)` must change sign across the interval.

    The interval is halved until its width is no larger than the
    absolute accuracy, and the final midpoint is returned.
    Convergence is linear but guaranteed.

    Examples
    --------
    >>> import math
    >>> solver = BisectionSolver()
    >>> round(solver.solve(100, math.cos, 0.0, 2.0), 6)
    1.570796
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> solver.solve(100, f, 0.0, 1.0)  # Solution in centre.
    0.5
    """

    def _do_solve(self) -> float:
        lo, hi = self.min, self.max
        self._verify_bracketing(lo, hi)
        absolute_accuracy = self.absolute_accuracy

        while True:
            x_m = midpoint(lo, hi)
            f_lo = self._compute_objective_value(lo)
            if f_lo == 0.0:
                return lo

            f_m = self._compute_objective_value(x_m)
            if f_m == 0.0:
                return x_m

            # Check which side root is on, narrow interval.
            if f_m * f_lo > 0:
                lo = x_m
            else:
                hi = x_m

            if abs(hi - lo) <= absolute_accuracy:
                return midpoint(lo, hi)
