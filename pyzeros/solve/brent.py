"""
Brent-type solvers.

References
----------
.. [1] Brent, R. P., *Algorithms for Minimization Without Derivatives*,
   Englewood Cliffs, NJ: Prentice-Hall, 1973.  Chapter 4.
.. [2] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
   Vetterling, W. T. *Numerical Recipes: The Art of Scientific
   Computing*, 3rd ed. Cambridge, England: Cambridge University
   Press, 2007. Section 9.3: "Van Wijngaarden-Dekker-Brent Method".
"""

import numpy as np

from pyzeros.numeric.polynomial import newton_poly
from pyzeros.solve.base import (AllowedSolution, BracketedUnivariateSolver,
                                UnivariateSolver)
from pyzeros.solve.exception import NotBracketingError

# Written by Eric J. Whitney, May 2024.

# Smallest positive double; values at or below this are treated as an
# exact zero by the N-th order solver.
_TINY = np.nextafter(0.0, 1.0)


# ======================================================================

class BrentSolver(UnivariateSolver):
    r"""
    Brent's method [1]_ combining bisection, secant and inverse
    quadratic interpolation.  At each step the interpolated step is
    accepted only if it is safely inside the bracket and is shrinking
    fast enough, otherwise a bisection step is used.

    The search starts from `start_value`, first trying the half
    interval [`min`, `start_value`] then [`start_value`, `max`].

    The tolerance is :math:`2 ε |b| + t`, where `ε` is the relative
    accuracy, `t` is the absolute accuracy and `b` is the best current
    estimate.

    Examples
    --------
    >>> solver = BrentSolver(absolute_accuracy=1e-9)
    >>> x = solver.solve(100, lambda x: x**2 - 2, 0.0, 2.0)
    >>> round(x, 6)
    1.414214
    """

    def _do_solve(self) -> float:
        lo, hi, initial = self.min, self.max, self.start_value
        ftol = self.function_value_accuracy
        self._verify_sequence(lo, initial, hi)

        # Return the initial guess if it is good enough.
        f_initial = self._compute_objective_value(initial)
        if abs(f_initial) <= ftol:
            return initial

        # Return the first endpoint if it is good enough.
        f_lo = self._compute_objective_value(lo)
        if abs(f_lo) <= ftol:
            return lo

        # Reduce interval if min and initial bracket the root.
        if f_initial * f_lo < 0:
            return self._brent(lo, initial, f_lo, f_initial)

        # Return the second endpoint if it is good enough.
        f_hi = self._compute_objective_value(hi)
        if abs(f_hi) <= ftol:
            return hi

        # Reduce interval if initial and max bracket the root.
        if f_initial * f_hi < 0:
            return self._brent(initial, hi, f_initial, f_hi)

        raise NotBracketingError(lo, hi, f_lo, f_hi)

    def _brent(self, lo: float, hi: float, f_lo: float,
               f_hi: float) -> float:
        """Brent's method on the bracket [`lo`, `hi`]."""
        a, fa = lo, f_lo
        b, fb = hi, f_hi
        c, fc = a, fa
        d = b - a
        e = d

        t = self.absolute_accuracy
        eps = self.relative_accuracy

        while True:
            # Keep b as the best estimate.
            if abs(fc) < abs(fb):
                a, b, c = b, c, b
                fa, fb, fc = fb, fc, fb

            tol = 2 * eps * abs(b) + t
            m = 0.5 * (c - b)

            if abs(m) <= tol or fb == 0.0:
                return b

            if abs(e) < tol or abs(fa) <= abs(fb):
                # Force bisection.
                d = m
                e = d

            else:
                s = fb / fa
                if a == c:
                    # Linear interpolation.
                    p = 2 * m * s
                    q = 1 - s

                else:
                    # Inverse quadratic interpolation.
                    q = fa / fc
                    r = fb / fc
                    p = s * (2 * m * q * (q - r) - (b - a) * (r - 1))
                    q = (q - 1) * (r - 1) * (s - 1)

                if p > 0:
                    q = -q
                else:
                    p = -p

                s = e
                e = d
                if p >= 1.5 * m * q - abs(tol * q) or p >= abs(0.5 * s * q):
                    # Interpolation rejected; fall back to bisection.
                    d = m
                    e = d
                else:
                    d = p / q

            a, fa = b, fb

            if abs(d) > tol:
                b += d
            elif m > 0:
                b += tol
            else:
                b -= tol

            fb = self._compute_objective_value(b)
            if (fb > 0 and fc > 0) or (fb <= 0 and fc <= 0):
                c, fc = a, fa
                d = b - a
                e = d


# ======================================================================

class BracketingNthOrderBrentSolver(BracketedUnivariateSolver):
    """
    Bracketing solver using inverse polynomial interpolation of up to
    `maximal_order` through the most recent points, similar in spirit
    to Brent's method.  The bracket is always preserved, so the result
    can be restricted to one side of the root using `AllowedSolution`.

    If one bound is retained for too many steps (*aging*), the
    interpolation target is moved slightly past zero so the next point
    is likely to replace that bound.  If the interpolated point falls
    outside the bracket, lower order interpolation is tried using
    points nearer the sign change, and finally bisection.

    Parameters
    ----------
    args :
        Accuracies, as per `UnivariateSolver`.
    maximal_order : int, default = 5
        Maximum order of the interpolating polynomial, ``>= 2``.
    kwargs :
        Passed to `UnivariateSolver`.

    Raises
    ------
    ValueError
        If ``maximal_order < 2``.
    """
    DEFAULT_MAXIMAL_ORDER = 5
    MAXIMAL_AGING = 2
    REDUCTION_FACTOR = 1.0 / 16.0

    def __init__(self, *args, maximal_order: int = DEFAULT_MAXIMAL_ORDER,
                 **kwargs):
        super().__init__(*args, **kwargs)
        if maximal_order < 2:
            raise ValueError(f"Requires maximal_order >= 2, got "
                             f"{maximal_order}.")

        self._maximal_order = maximal_order

    # -- Public Methods ------------------------------------------------

    @property
    def maximal_order(self) -> int:
        return self._maximal_order

    # -- Private Methods -----------------------------------------------

    def _do_solve(self) -> float:
        # Points retained for interpolation, sorted in increasing x.
        # Each list holds at most (maximal_order + 1) entries.
        x = [self.min, self.start_value, self.max]
        self._verify_sequence(x[0], x[1], x[2])

        y = [np.nan] * 3
        y[1] = self._compute_objective_value(x[1])
        if abs(y[1]) <= _TINY:
            return x[1]

        y[0] = self._compute_objective_value(x[0])
        if abs(y[0]) <= _TINY:
            return x[0]

        if y[0] * y[1] < 0:
            # Reduce to the lower half interval.
            x, y = x[:2], y[:2]
            sign_idx = 1

        else:
            y[2] = self._compute_objective_value(x[2])
            if abs(y[2]) <= _TINY:
                return x[2]

            if y[1] * y[2] < 0:
                sign_idx = 2
            else:
                raise NotBracketingError(x[0], x[2], y[0], y[2])

        max_points = self._maximal_order + 1

        # Current bracket [xA, xB] straddling the sign change.
        x_a, y_a = x[sign_idx - 1], y[sign_idx - 1]
        x_b, y_b = x[sign_idx], y[sign_idx]
        aging_a, aging_b = 0, 0

        while True:
            # Check convergence of the bracket.
            x_tol = (self.absolute_accuracy + self.relative_accuracy *
                     max(abs(x_a), abs(x_b)))
            if ((x_b - x_a) <= x_tol or
                    max(abs(y_a), abs(y_b)) < self.function_value_accuracy):
                return self._select_side(x_a, y_a, x_b, y_b)

            # Target a value slightly beyond zero if a bound is aging.
            if aging_a >= self.MAXIMAL_AGING:
                p = aging_a - self.MAXIMAL_AGING
                weight_a, weight_b = (1 << p) - 1, p + 1
                target_y = ((weight_a * y_a - weight_b *
                             self.REDUCTION_FACTOR * y_b) /
                            (weight_a + weight_b))

            elif aging_b >= self.MAXIMAL_AGING:
                p = aging_b - self.MAXIMAL_AGING
                weight_a, weight_b = p + 1, (1 << p) - 1
                target_y = ((weight_b * y_b - weight_a *
                             self.REDUCTION_FACTOR * y_a) /
                            (weight_a + weight_b))

            else:
                target_y = 0.0

            # Guess a new point by inverse polynomial interpolation,
            # dropping the furthest points until it is inside the
            # bracket.
            start, end = 0, len(x)
            next_x = np.nan
            while end - start > 1:
                next_x = self._guess_x(target_y, x[start:end], y[start:end])
                if x_a < next_x < x_b:
                    break

                if sign_idx - start >= end - sign_idx:
                    start += 1
                else:
                    end -= 1
                next_x = np.nan

            if np.isnan(next_x):
                # Fall back to bisection.
                next_x = x_a + 0.5 * (x_b - x_a)
                start, end = sign_idx - 1, sign_idx

            next_y = self._compute_objective_value(next_x)
            if abs(next_y) <= _TINY:
                return next_x

            if len(x) > 2 and end - start != len(x):
                # Keep only the points used for the accepted guess.
                x, y = x[start:end], y[start:end]
                sign_idx -= start

            elif len(x) == max_points:
                # Drop the point furthest from the sign change.
                if sign_idx >= (max_points + 1) // 2:
                    x, y = x[1:], y[1:]
                    sign_idx -= 1
                else:
                    x, y = x[:-1], y[:-1]

            # Insert the new point at the sign change.
            x.insert(sign_idx, next_x)
            y.insert(sign_idx, next_y)

            if next_y * y_a <= 0:
                # New point replaces B.
                x_b, y_b = next_x, next_y
                aging_a += 1
                aging_b = 0
            else:
                # New point replaces A.
                x_a, y_a = next_x, next_y
                aging_a = 0
                aging_b += 1
                sign_idx += 1

    @staticmethod
    def _guess_x(target_y: float, x: list[float], y: list[float]) -> float:
        """Inverse Newton polynomial through (`y`, `x`) at `target_y`."""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(newton_poly(y, x, [target_y])[0])

    def _select_side(self, x_a: float, y_a: float, x_b: float,
                     y_b: float) -> float:
        allowed = self._allowed
        if allowed == AllowedSolution.LEFT_SIDE:
            return x_a
        elif allowed == AllowedSolution.RIGHT_SIDE:
            return x_b
        elif allowed == AllowedSolution.BELOW_SIDE:
            return x_a if y_a <= 0 else x_b
        elif allowed == AllowedSolution.ABOVE_SIDE:
            return x_b if y_a < 0 else x_a
        else:
            return x_a if abs(y_a) < abs(y_b) else x_b
