"""
Laguerre's method for real polynomials, including complex roots and
extraction of all roots by deflation.

References
----------
.. [1] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
   Vetterling, W. T. *Numerical Recipes: The Art of Scientific
   Computing*, 3rd ed. Cambridge, England: Cambridge University
   Press, 2007. Section 9.5.1: "Laguerre's Method".
"""

from __future__ import annotations

import sys
import warnings
from collections.abc import Sequence

import numpy as np
from numpy.polynomial import Polynomial

from pyzeros.numeric.polynomial import deflate, horner_derivs
from pyzeros.solve.base import UnivariateSolver
from pyzeros.solve.exception import EmptyPolynomialError, NotBracketingError

# Written by Eric J. Whitney, May 2024.


# ======================================================================

class LaguerreSolver(UnivariateSolver):
    """
    Laguerre's method [1]_ for finding roots of a polynomial.  The
    iteration is carried out in the complex plane, so it converges to
    complex roots as well as real ones, almost always from any starting
    point.

    Three entry points are provided:

    - `solve()`: A real root in [`lo`, `hi`] of a polynomial given
      either as a `numpy.polynomial.Polynomial` or a sequence of
      coefficients (constant term first).
    - `solve_complex()`: A single complex root near a starting point.
    - `solve_all_complex()`: All roots, found one at a time with
      deflation of the polynomial after each.

    Each Laguerre step is charged as one evaluation against the budget.

    Examples
    --------
    >>> solver = LaguerreSolver()
    >>> roots = solver.solve_all_complex([-6, 11, -6, 1], 0.0)
    >>> sorted(round(z.real, 6) for z in roots)
    [1.0, 2.0, 3.0]
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._coefficients = np.zeros(0)

    # -- Public Methods ------------------------------------------------

    @property
    def coefficients(self) -> np.ndarray:
        """Real coefficients of the current polynomial."""
        return self._coefficients.copy()

    def laguerre(self, lo: float, hi: float, f_lo: float,
                 f_hi: float) -> float:
        """
        Find a real root in [`lo`, `hi`] by Laguerre's method started
        from the midpoint.  If that finds a root outside the interval
        (or a complex root), all roots are computed and the first that
        is real and inside the interval is returned.

        Parameters
        ----------
        lo, hi : float
            Interval containing a root.
        f_lo, f_hi : float
            Function values at `lo` and `hi` (not used by the
            calculation).

        Returns
        -------
        float
            Real root, or NaN (with a `RuntimeWarning`) if no root
            qualifies.
        """
        c = self._coefficients.astype(complex)
        initial = complex(0.5 * (lo + hi), 0.0)

        z = self._solve_complex(c, initial)
        if self._is_root(lo, hi, z):
            return z.real

        # Solve all roots and select the one we are seeking.
        for root in self._solve_all_complex(c, initial):
            if self._is_root(lo, hi, root):
                return root.real

        warnings.warn(f"No real root found in [{lo}, {hi}].",
                      RuntimeWarning)
        return np.nan

    def solve(self, max_eval: int, f: Polynomial | Sequence[float],
              lo: float = np.nan, hi: float = np.nan,
              start_value: float = None) -> float:
        """
        As per `UnivariateSolver.solve`, except `f` must be a
        `numpy.polynomial.Polynomial` or a sequence of its coefficients.

        Raises
        ------
        EmptyPolynomialError
            If the polynomial is a constant.
        TypeError
            If `f` is a general (non-polynomial) function.
        """
        return super().solve(max_eval, self._set_polynomial(f), lo, hi,
                             start_value)

    def solve_all_complex(self, coefficients: Sequence[float],
                          initial: float,
                          max_eval: int = sys.maxsize) -> np.ndarray:
        """
        Find all complex roots of a polynomial.

        Parameters
        ----------
        coefficients : Sequence[float]
            Real coefficients, constant term first.  These are not
            modified.
        initial : float
            Start value for each root.
        max_eval : int, default = sys.maxsize
            Maximum total number of Laguerre steps.

        Returns
        -------
        np.ndarray of complex, shape (n,)
            Roots of the degree `n` polynomial, in the order found.

        Raises
        ------
        EmptyPolynomialError
            If the polynomial is a constant.
        TooManyEvaluationsError
            If `max_eval` is exceeded.
        """
        self._setup_complex(max_eval, coefficients, initial)
        return self._solve_all_complex(self._coefficients.astype(complex),
                                       complex(initial, 0.0))

    def solve_complex(self, coefficients: Sequence[float], initial: float,
                      max_eval: int = sys.maxsize) -> complex:
        """
        Find a single complex root of a polynomial, usually the one
        nearest `initial`.  Parameters and exceptions are as per
        `solve_all_complex`.

        Examples
        --------
        :math:`x^2 + 1` has no real roots:
        >>> z = LaguerreSolver().solve_complex([1.0, 0.0, 1.0], 0.0)
        >>> round(abs(z.imag), 8), abs(z.real) < 1e-8
        (1.0, True)
        """
        self._setup_complex(max_eval, coefficients, initial)
        return self._solve_complex(self._coefficients.astype(complex),
                                   complex(initial, 0.0))

    # -- Private Methods -----------------------------------------------

    def _do_solve(self) -> float:
        lo, hi, initial = self.min, self.max, self.start_value
        ftol = self.function_value_accuracy
        self._verify_sequence(lo, initial, hi)

        f_initial = self._compute_objective_value(initial)
        if abs(f_initial) <= ftol:
            return initial

        f_lo = self._compute_objective_value(lo)
        if abs(f_lo) <= ftol:
            return lo

        if f_initial * f_lo < 0:
            return self.laguerre(lo, initial, f_lo, f_initial)

        f_hi = self._compute_objective_value(hi)
        if abs(f_hi) <= ftol:
            return hi

        if f_initial * f_hi < 0:
            return self.laguerre(initial, hi, f_initial, f_hi)

        raise NotBracketingError(lo, hi, f_lo, f_hi)

    def _is_root(self, lo: float, hi: float, z: complex) -> bool:
        """
        Returns `True` if `z` is a real root in [`lo`, `hi`], i.e. its
        imaginary part is within tolerance.
        """
        if self._is_sequence(lo, z.real, hi):
            tol = self.accuracy.tolerance(abs(z))
            return (abs(z.imag) <= tol or
                    abs(z) <= self.function_value_accuracy)
        return False

    def _set_polynomial(self, f) -> Polynomial | None:
        # Convert and check polynomial, returning it as the function.
        if f is None:
            return None  # Rejected by _setup().

        if not isinstance(f, Polynomial):
            if callable(f):
                raise TypeError(f"{type(self).__name__} requires a "
                                f"Polynomial or coefficients.")
            f = Polynomial(np.asarray(f, dtype=float))

        coefficients = f.convert().coef
        if len(coefficients) < 2:
            raise EmptyPolynomialError(coefficients)

        self._coefficients = coefficients
        return f

    def _setup_complex(self, max_eval: int, coefficients: Sequence[float],
                       initial: float):
        f = self._set_polynomial(coefficients)
        self._setup(max_eval, f, -np.inf, np.inf, initial)

    def _solve_all_complex(self, coefficients: np.ndarray,
                           initial: complex) -> np.ndarray:
        n = len(coefficients) - 1
        if n < 1:
            raise EmptyPolynomialError(coefficients)

        # Each deflation step gives a new, shorter coefficient array.
        roots = np.empty(n, dtype=complex)
        c = coefficients
        for i in range(n):
            roots[i] = self._solve_complex(c, initial)
            if i < n - 1:
                c, _ = deflate(c, roots[i])

        return roots

    def _solve_complex(self, coefficients: np.ndarray,
                       initial: complex) -> complex:
        n = len(coefficients) - 1
        if n < 1:
            raise EmptyPolynomialError(coefficients)

        atol = self.absolute_accuracy
        ftol = self.function_value_accuracy

        z = complex(initial)
        z_old = complex(np.inf, np.inf)
        while True:
            p, dp, d2p = horner_derivs(coefficients, z)
            p, dp, d2p = complex(p), complex(dp), complex(d2p)

            # Check for convergence.
            if abs(z - z_old) <= self.accuracy.tolerance(abs(z)):
                return z
            if abs(p) <= ftol:
                return z

            G = dp / p
            G2 = G * G
            H = G2 - d2p / p
            Δ = (n - 1) * (n * H - G2)

            # Choose a denominator larger in magnitude.
            sqrt_Δ = complex(np.sqrt(complex(Δ)))
            d_plus, d_minus = G + sqrt_Δ, G - sqrt_Δ
            denom = d_plus if abs(d_plus) > abs(d_minus) else d_minus

            if denom == 0:
                # Perturb z if denominator is zero, e.g. x**3 + 1 at 0.
                z += complex(atol, atol)
                z_old = complex(np.inf, np.inf)
            else:
                z_old = z
                z -= n / denom

            self._increment_evaluation_count()
