"""
Secant-type solvers.  The three bracketing variants (Regula Falsi,
Illinois and Pegasus) share a single loop and differ only in how the
function value of a bound that was not replaced is scaled down.  The
plain secant method is included for comparison; it does not keep the
root bracketed.

References
----------
.. [1] Dowell, M. and Jarratt, P., "A modified regula falsi method for
   computing the root of an equation", BIT Numerical Mathematics,
   Vol. 11, No. 2, 1971, pp. 168-174.
.. [2] Dowell, M. and Jarratt, P., "The 'Pegasus' method for computing
   the root of an equation", BIT Numerical Mathematics, Vol. 12,
   No. 4, 1972, pp. 503-508.
"""

from enum import Enum

from pyzeros.solve.base import (AllowedSolution, BracketedUnivariateSolver,
                                UnivariateSolver)
from pyzeros.solve.exception import StagnationError


# Written by Eric J. Whitney, May 2024.


# ======================================================================

class SecantMethod(Enum):
    """Rule applied to the function value of the retained bound."""
    REGULA_FALSI = 0
    ILLINOIS = 1
    PEGASUS = 2


# ----------------------------------------------------------------------

class BaseSecantSolver(BracketedUnivariateSolver):
    """
    Bracketing secant solver.  At each step the secant through the two
    bounds gives a new point `x`.  If `f(x)` has the opposite sign to
    the most recent bound, the bracket flips; otherwise the older bound
    is retained and its function value is modified according to
    `method`:

    - ``REGULA_FALSI``: Unchanged.  Raises `StagnationError` if the new
      point does not move.
    - ``ILLINOIS``: Halved.
    - ``PEGASUS``: Scaled by ``f1 / (f1 + fx)``.

    Parameters
    ----------
    method : SecantMethod
        Update rule for the retained bound.
    args, kwargs :
        Accuracy and display options passed to `UnivariateSolver`.
    """

    def __init__(self, *args, method: SecantMethod, **kwargs):
        super().__init__(*args, **kwargs)
        self._method = method

    # -- Public Methods ------------------------------------------------

    @property
    def method(self) -> SecantMethod:
        return self._method

    # -- Private Methods -----------------------------------------------

    def _do_solve(self) -> float:
        x0, x1 = self.min, self.max
        f0 = self._compute_objective_value(x0)
        f1 = self._compute_objective_value(x1)

        # If one of the bounds is the exact root, return it.
        if f0 == 0.0:
            return x0
        if f1 == 0.0:
            return x1

        self._verify_bracketing(x0, x1)

        ftol = self.function_value_accuracy
        atol = self.absolute_accuracy
        rtol = self.relative_accuracy

        # 'inverted' tracks if x1 is currently the left side of the
        # bracket.
        inverted = False

        while True:
            x = x1 - ((f1 * (x1 - x0)) / (f1 - f0))
            fx = self._compute_objective_value(x)

            if fx == 0.0:
                return x

            if f1 * fx < 0:
                # Bracket is between x1 and x; x1 becomes the old bound.
                x0, f0 = x1, f1
                inverted = not inverted

            else:
                if self._method == SecantMethod.ILLINOIS:
                    f0 *= 0.5
                elif self._method == SecantMethod.PEGASUS:
                    f0 *= f1 / (f1 + fx)
                elif x == x1:  # Regula Falsi.
                    raise StagnationError(x)

            x1, f1 = x, fx

            # Stop on function value, if the side is acceptable.
            if abs(f1) <= ftol:
                allowed = self._allowed
                if (allowed == AllowedSolution.ANY_SIDE or
                        (allowed == AllowedSolution.LEFT_SIDE and inverted) or
                        (allowed == AllowedSolution.RIGHT_SIDE and
                         not inverted) or
                        (allowed == AllowedSolution.BELOW_SIDE and f1 <= 0) or
                        (allowed == AllowedSolution.ABOVE_SIDE and f1 >= 0)):
                    return x1

            # Stop on bracket width, choosing the acceptable side.
            if abs(x1 - x0) < max(rtol * abs(x1), atol):
                allowed = self._allowed
                if allowed == AllowedSolution.LEFT_SIDE:
                    return x1 if inverted else x0
                elif allowed == AllowedSolution.RIGHT_SIDE:
                    return x0 if inverted else x1
                elif allowed == AllowedSolution.BELOW_SIDE:
                    return x1 if f1 <= 0 else x0
                elif allowed == AllowedSolution.ABOVE_SIDE:
                    return x1 if f1 >= 0 else x0
                else:
                    return x1


# ----------------------------------------------------------------------

class RegulaFalsiSolver(BaseSecantSolver):
    """
    *Regula Falsi* (false position) method.  This is the basic
    bracketing secant method and can converge very slowly when one
    bound is never replaced.  `IllinoisSolver` or `PegasusSolver` are
    usually better choices.

    Raises `StagnationError` if the iteration stops moving.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, method=SecantMethod.REGULA_FALSI, **kwargs)


class IllinoisSolver(BaseSecantSolver):
    """
    *Illinois* method [1]_.  Halves the function value of a bound that
    is retained on consecutive steps.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, method=SecantMethod.ILLINOIS, **kwargs)


class PegasusSolver(BaseSecantSolver):
    """
    *Pegasus* method [2]_.  Scales the function value of a retained
    bound by ``f1 / (f1 + fx)``.  Typically slightly faster than the
    Illinois method.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, method=SecantMethod.PEGASUS, **kwargs)


# ======================================================================

class SecantSolver(UnivariateSolver):
    """
    Plain secant method.  The iteration starts from the ends of a
    bracketing interval but always keeps the two most recent points, so
    the root is not kept bracketed and convergence is not guaranteed.
    Where it converges the rate is superlinear (order ≈ 1.618).
    """

    def _do_solve(self) -> float:
        x0, x1 = self.min, self.max
        f0 = self._compute_objective_value(x0)
        f1 = self._compute_objective_value(x1)

        if f0 == 0.0:
            return x0
        if f1 == 0.0:
            return x1

        self._verify_bracketing(x0, x1)

        ftol = self.function_value_accuracy
        atol = self.absolute_accuracy
        rtol = self.relative_accuracy

        while True:
            x = x1 - ((f1 * (x1 - x0)) / (f1 - f0))
            fx = self._compute_objective_value(x)

            if fx == 0.0:
                return x

            x0, f0 = x1, f1
            x1, f1 = x, fx

            if abs(f1) <= ftol:
                return x1

            if abs(x1 - x0) < max(rtol * abs(x1), atol):
                return x1
