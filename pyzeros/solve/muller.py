"""
Muller's method solvers, using quadratic interpolation through three
points.

References
----------
.. [1] Muller, D. E., "A method for solving algebraic equations using an
   automatic computer", Mathematical Tables and Other Aids to
   Computation, Vol. 10, No. 56, 1956, pp. 208-215.
"""

import numpy as np

from pyzeros.numeric.polynomial import divided_difference, quadratic_roots
from pyzeros.solve.base import UnivariateSolver
from pyzeros.solve.bracket import midpoint
from pyzeros.solve.exception import NotBracketingError


# Written by Eric J. Whitney, May 2024.


# ======================================================================

class MullerSolver(UnivariateSolver):
    """
    Bracketing form of Muller's method.  The parabola through the two
    ends of the bracket [`x0`, `x2`] and an interior point `x1` is
    solved for the real root lying inside the bracket, which replaces
    `x1` on the next step.

    A bisection step is used instead if neither root of the parabola
    lies inside the bracket, or if the new point would shrink the
    bracket by less than 5%.  The search starts on the half of the
    interval (either side of `start_value`) that brackets the root.

    Convergence is when successive points are within
    ``max(relative_accuracy * |x|, absolute_accuracy)`` or
    ``|f(x)| <= function_value_accuracy``.  An exact zero at either end or
    at `start_value` is returned immediately.

    Examples
    --------
    >>> solver = MullerSolver(absolute_accuracy=1e-10)
    >>> x = solver.solve(100, lambda x: x**3 - 2 * x - 5, 2.0, 3.0)
    >>> round(x, 8)
    2.09455148
    """

    def _do_solve(self) -> float:
        lo, hi, initial = self.min, self.max, self.start_value
        ftol = self.function_value_accuracy
        self._verify_sequence(lo, initial, hi)

        # Check for zeros before verifying bracketing.
        f_lo = self._compute_objective_value(lo)
        if abs(f_lo) <= ftol:
            return lo
        f_hi = self._compute_objective_value(hi)
        if abs(f_hi) <= ftol:
            return hi
        f_initial = self._compute_objective_value(initial)
        if abs(f_initial) <= ftol:
            return initial

        self._verify_bracketing(lo, hi)

        if self._is_bracketing(lo, initial):
            return self._muller(lo, initial, f_lo, f_initial)
        else:
            return self._muller(initial, hi, f_initial, f_hi)

    def _muller(self, lo: float, hi: float, f_lo: float,
                f_hi: float) -> float:
        ftol = self.function_value_accuracy
        # [x0, x2] is the bracket, x1 is an interior point.
        x0, y0 = lo, f_lo
        x2, y2 = hi, f_hi
        x1 = midpoint(x0, x2)
        y1 = self._compute_objective_value(x1)
        x_old = np.inf

        while True:
            # Parabola p(t) = y1 + c1 * t + d012 * t**2, with t = x - x1.
            d01 = divided_difference([x0, x1], [y0, y1])
            d012 = divided_difference([x0, x1, x2], [y0, y1, y2])
            c1 = d01 + (x1 - x0) * d012

            candidates = [x1 + t for t in
                          quadratic_roots(d012, c1, y1, allow_complex=False)
                          if self._is_sequence(x0, x1 + t, x2)]

            if candidates:
                x = min(candidates, key=lambda xc: abs(xc - x1))
                y = self._compute_objective_value(x)

                if (abs(x - x_old) <= self.accuracy.tolerance(x) or
                        abs(y) <= ftol):
                    return x

                # Bisect if convergence is too slow.
                width = x2 - x0
                bisect = ((x < x1 and (x1 - x0) > 0.95 * width) or
                          (x > x1 and (x2 - x1) > 0.95 * width) or
                          x == x1)
            else:
                bisect = True

            if not bisect:
                if x < x1:
                    x2, y2 = x1, y1
                else:
                    x0, y0 = x1, y1
                x1, y1 = x, y
                x_old = x

            else:
                x_m = midpoint(x0, x2)
                y_m = self._compute_objective_value(x_m)
                if abs(y_m) <= ftol:
                    return x_m

                if np.sign(y0) + np.sign(y_m) == 0:
                    x2, y2 = x_m, y_m
                else:
                    x0, y0 = x_m, y_m

                x1 = midpoint(x0, x2)
                y1 = self._compute_objective_value(x1)
                x_old = np.inf


# ======================================================================

class MullerSolver2(UnivariateSolver):
    """
    Open form of Muller's method.  The parabola is fitted through the
    three most recent points (which need not bracket the root) and the
    next point is its root nearest the latest point.  Complex roots of
    the parabola are handled by taking the modulus of the denominator,
    so the iteration stays on the real axis.

    The function must change sign over [`min`, `max`] at the start, but
    the root is not kept bracketed afterwards.

    Parameters
    ----------
    args :
        Accuracies, as per `UnivariateSolver`.
    seed : int, optional
        Seed for the random restart used if the denominator vanishes.
    kwargs :
        Passed to `UnivariateSolver`.
    """

    def __init__(self, *args, seed: int = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._rng = np.random.default_rng(seed)

    def _do_solve(self) -> float:
        lo, hi = self.min, self.max
        self._verify_interval(lo, hi)
        ftol = self.function_value_accuracy
        atol = self.absolute_accuracy

        # x2 is the latest point; x0 < x1 < x2 need not hold.
        x0 = lo
        y0 = self._compute_objective_value(x0)
        if abs(y0) <= ftol:
            return x0

        x1 = hi
        y1 = self._compute_objective_value(x1)
        if abs(y1) <= ftol:
            return x1

        if y0 * y1 > 0:
            raise NotBracketingError(x0, x1, y0, y1)

        x2 = midpoint(x0, x1)
        y2 = self._compute_objective_value(x2)
        x_old = np.inf

        while True:
            q = (x2 - x1) / (x1 - x0)
            a = q * (y2 - (1 + q) * y1 + q * y0)
            b = (2 * q + 1) * y2 - (1 + q) ** 2 * y1 + q ** 2 * y0
            c = (1 + q) * y2
            Δ = b * b - 4 * a * c

            if Δ >= 0.0:
                # Choose the larger magnitude denominator.
                d_plus, d_minus = b + np.sqrt(Δ), b - np.sqrt(Δ)
                denom = d_plus if abs(d_plus) > abs(d_minus) else d_minus
            else:
                denom = np.sqrt(b * b - Δ)  # Modulus of b ± sqrt(Δ).

            if denom != 0.0:
                x = x2 - 2.0 * c * (x2 - x1) / denom
                while x == x1 or x == x2:
                    x += atol
            else:
                # Degenerate parabola, restart from a random point.
                x = lo + self._rng.random() * (hi - lo)
                x_old = np.inf

            y = self._compute_objective_value(x)
            if (abs(x - x_old) <= self.accuracy.tolerance(x) or
                    abs(y) <= ftol):
                return x

            x0, y0 = x1, y1
            x1, y1 = x2, y2
            x2, y2 = x, y
            x_old = x
