import numpy as np

from pyzeros.solve.base import UnivariateSolver
from pyzeros.solve.bracket import midpoint


# Written by Eric J. Whitney, May 2024.


# ======================================================================

class RiddersSolver(UnivariateSolver):
    r"""
    Ridders' method [1]_.  Each step evaluates the midpoint `x3` of the
    bracket [`x1`, `x2`] then applies an exponential correction:

    .. math:: x = x_3 - \operatorname{sign}(y_2)
              \operatorname{sign}(y_3) \frac{x_3 - x_1}
              {\sqrt{1 - y_1 y_2 / y_3^2}}

    The new bracket is the tightest pair among `x1`, `x3`, `x`, `x2`
    that still changes sign.  Convergence is quadratic near the root
    and the root always stays bracketed.

    References
    ----------
    .. [1] Ridders, C., "A new algorithm for computing a single root of
       a real continuous function", IEEE Transactions on Circuits and
       Systems, Vol. 26, No. 11, 1979, pp. 979-980.

    Examples
    --------
    >>> import math
    >>> solver = RiddersSolver(absolute_accuracy=1e-10)
    >>> round(solver.solve(100, lambda x: math.exp(x) - 2, 0.0, 1.0), 8)
    0.69314718
    """

    def _do_solve(self) -> float:
        x1, x2 = self.min, self.max
        ftol = self.function_value_accuracy

        y1 = self._compute_objective_value(x1)
        y2 = self._compute_objective_value(x2)

        # Check for zeros before verifying bracketing.
        if y1 == 0.0:
            return x1
        if y2 == 0.0:
            return x2

        self._verify_bracketing(x1, x2)

        x_old = np.inf
        while True:
            x3 = midpoint(x1, x2)
            y3 = self._compute_objective_value(x3)
            if abs(y3) <= ftol:
                return x3

            delta = 1 - (y1 * y2) / (y3 * y3)  # Always > 1.
            correction = (np.sign(y2) * np.sign(y3) * (x3 - x1) /
                          np.sqrt(delta))
            x = x3 - correction
            y = self._compute_objective_value(x)

            if (abs(x - x_old) <= self.accuracy.tolerance(x) or
                    abs(y) <= ftol):
                return x

            # Form the new bracket.
            if correction > 0.0:  # x1 < x < x3.
                if np.sign(y1) + np.sign(y) == 0.0:
                    x2, y2 = x, y
                else:
                    x1, y1 = x, y
                    x2, y2 = x3, y3

            else:  # x3 < x < x2.
                if np.sign(y2) + np.sign(y) == 0.0:
                    x1, y1 = x, y
                else:
                    x1, y1 = x3, y3
                    x2, y2 = x, y

            x_old = x
