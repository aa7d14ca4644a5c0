"""
Polynomials (:mod:`pyzeros.numeric.polynomial`)
===============================================

.. currentmodule:: pyzeros.numeric.polynomial

Polynomial operations used by the interpolating and polynomial
solvers.  Unless stated otherwise, coefficient sequences are ordered by
increasing power, i.e. ``c[0]`` is the constant term (the same
convention as `numpy.polynomial`).
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt


# Written by Eric J. Whitney, April 2024.


# ======================================================================

def divided_difference(x: npt.ArrayLike, y: npt.ArrayLike) -> float:
    """
    Calculate a single divided difference value `f[x0, x1, ..., xn]`
    based on the number of `(x, y)` points provided.

    Parameters
    ----------
    x, y : array_like of float, shape (n,)
        Arrays of `x` and `y` values.  The order corresponds to the
        divided difference required.

    Returns
    -------
    float
        The value of the divided difference.

    Notes
    -----
    - The first divided difference is :math:`f[x_0] = y_0`, then
      :math:`f[x_0, x_1] = (y_1 - y_0) / (x_1 - x_0)` and so on
      recursively.  Divided differences are symmetric in their
      arguments.
    - Working values are cast to `float` as purely integer parameters
      may result in integer division giving incorrect results.

    Examples
    --------
    Points `(0, -2)`, `(1, -1)`, `(2, 2)` lie on :math:`y = x^2 - 2`:
    >>> divided_difference([0], [-2])  # 0th D-D.
    -2.0
    >>> divided_difference([0, 1], [-2, -1])  # 1st D-D.
    1.0
    >>> divided_difference([0, 1, 2], [-2, -1, 2])  # 2nd D-D.
    1.0
    """
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    n = len(x)
    if n < 1 or np.ndim(x) != 1 or x.shape != y.shape:
        raise ValueError("'x' and 'y' must be 1D arrays of equal "
                         "length >= 1.")

    elif n == 1:
        return float(y[0])

    elif n == 2:
        return float(y[1] - y[0]) / float(x[1] - x[0])

    else:
        return (divided_difference(x[1:], y[1:]) -
                divided_difference(x[:-1], y[:-1])) / float(x[-1] - x[0])


# ----------------------------------------------------------------------

def newton_poly_coeff(x: npt.ArrayLike,
                      y: npt.ArrayLike) -> np.ndarray[float]:
    """
    Generate the array of divided differences `[f[x0], f[x0, x1],
    f[x0, x1, x2], ...]` for the points `(x, y)`.  These are the
    coefficients of the interpolating polynomial in Newton form.

    Parameters
    ----------
    x, y : array_like of float, shape (n,)
        Arrays of `x` and `y` values.  The `x` values must be distinct
        but need not be sorted.

    Returns
    -------
    np.ndarray of float, shape (n,)
        Newton form coefficients.
    """
    x = np.asarray(x, dtype=float)
    a = np.array(y, dtype=float, copy=True)
    if (np.ndim(x) != 1) or (x.shape != a.shape):
        raise ValueError("'x' and 'y' must have the same shape (n,).")

    n = len(x)
    for i in range(1, n):
        a[i:n] = (a[i:n] - a[i - 1]) / (x[i:n] - x[i - 1])

    return a


def newton_poly(x_pts: npt.ArrayLike, y_pts: npt.ArrayLike,
                x: npt.ArrayLike) -> np.ndarray:
    """
    Evaluate the Newton interpolating polynomial through the points
    (`x_pts`, `y_pts`) at the new points `x`.

    Parameters
    ----------
    x_pts, y_pts : array_like, shape (n + 1,)
        Coordinates of the known points.
    x : array_like, shape (m,)
        New `x`-coordinates at which to evaluate the polynomial.

    Returns
    -------
    np.ndarray, shape (m,)
        The interpolated values.

    Notes
    -----
    Swapping the roles of `x_pts` and `y_pts` gives *inverse*
    interpolation, i.e. an estimate of the `x` giving a target `y`.

    Examples
    --------
    Inverse interpolation of :math:`y = 2x + 1` to find `y = 0`:
    >>> newton_poly([1.0, 3.0, 5.0], [0.0, 1.0, 2.0], [0.0])
    array([-0.5])
    """
    x = np.asarray(x)
    if np.ndim(x) != 1:
        raise ValueError("'x' must be a 1D array.")

    a = newton_poly_coeff(x_pts, y_pts)
    n = len(x_pts) - 1  # Degree of interpolating polynomial.
    p = a[n]

    for k in range(1, n + 1):
        p = a[n - k] + (x - x_pts[n - k]) * p

    return np.asarray(p)


# ======================================================================

def quadratic_roots(a: float, b: float, c: float, *,
                    allow_complex: bool = True
                    ) -> tuple[float | complex, ...]:
    """
    Return roots of the quadratic equation :math:`0 = ax^2 + bx + c`
    with real coefficients `a`, `b`, `c`.  The calculation avoids the
    cancellation error of the textbook formula for poorly conditioned
    equations [1]_.  The straight-line case (``a=0``) is also handled.

    Parameters
    ----------
    a, b, c : float
      Real-valued coefficients of the equation.

    allow_complex : bool, default = True
      If `True`, complex valued roots are included in the result (if
      present).  If `False`, these are omitted.

    Returns
    -------
    roots : tuple[float | complex, ...]
        Zero, one or two roots.  No roots are returned for a line
        parallel to the x-axis, or for a complex pair when
        ``allow_complex=False``.

    References
    ----------
    .. [1] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
           Vetterling, W. T. *Numerical Recipes: The Art of Scientific
           Computing*, 3rd ed. Cambridge, England: Cambridge University
           Press, pp. 227, 2007. Section 5.6: "Quadratic and Cubic
           Equations".

    Examples
    --------
    >>> quadratic_roots(1, -3, 2)
    (2.0, 1.0)
    >>> quadratic_roots(1, -2, 1)
    (1.0,)
    >>> quadratic_roots(1, 0, 1)
    ((-0-1j), (-0+1j))
    >>> quadratic_roots(1, 0, 1, allow_complex=False)
    ()
    >>> quadratic_roots(0, 5, -3)
    (0.6,)
    """
    if a == 0.0:
        if b != 0.0:
            return (-c / b,)  # Line with slope, one root.
        else:
            return ()  # Line parallel to x-axis, no roots.

    # Note: np.sign(0) = 0, so sign(b) is set manually.
    Δ = b * b - 4 * a * c
    sign_b = +1 if b >= 0 else -1

    if Δ > 0.0:  # Two real roots.
        q = -0.5 * (b + sign_b * np.sqrt(Δ))
        return q / a, c / q

    elif Δ == 0.0:  # Single real root.
        return (-0.5 * b / a,)

    else:
        if allow_complex:
            # Note: np.sqrt() requires a complex argument.
            q = -0.5 * (b + sign_b * np.sqrt(Δ + 0j))
            return q / a, c / q

        else:
            return ()


# ======================================================================

def horner_derivs(coefficients: Sequence[complex] | np.ndarray,
                  z: complex) -> tuple[complex, complex, complex]:
    """
    Evaluate a polynomial together with its first and second
    derivatives at `z` in a single pass of Horner's scheme.

    Parameters
    ----------
    coefficients : sequence of float or complex, shape (n + 1,)
        Polynomial coefficients, constant term first.
    z : float or complex
        Point of evaluation.

    Returns
    -------
    p, dp, d2p : tuple[complex, complex, complex]
        Values of :math:`p(z)`, :math:`p'(z)` and :math:`p''(z)`.

    Examples
    --------
    For :math:`p(x) = x^3 - 6x^2 + 11x - 6` at `x = 0`:
    >>> horner_derivs([-6, 11, -6, 1], 0.0)
    (-6.0, 11.0, -12.0)
    """
    n = len(coefficients) - 1
    p, dp, d2p = coefficients[n], 0.0 * z, 0.0 * z
    for j in range(n - 1, -1, -1):
        d2p = dp + z * d2p
        dp = p + z * dp
        p = coefficients[j] + z * p

    return p, dp, 2.0 * d2p


def deflate(coefficients: Sequence[complex] | np.ndarray,
            root: complex) -> tuple[np.ndarray, complex]:
    """
    Divide a polynomial by the linear factor :math:`(x - r)` using
    synthetic division.  The input coefficients are not modified.

    Parameters
    ----------
    coefficients : sequence of float or complex, shape (n + 1,)
        Polynomial coefficients, constant term first.  Degree `n` must
        be at least 1.
    root : float or complex
        The root `r` to remove.

    Returns
    -------
    quotient : np.ndarray, shape (n,)
        Coefficients of the deflated polynomial (degree `n - 1`).
    remainder : float or complex
        The remainder, equal to :math:`p(r)`.  This is (close to) zero
        when `r` is a root.

    Examples
    --------
    :math:`x^2 - 3x + 2 = (x - 1)(x - 2)`:
    >>> q, rem = deflate([2.0, -3.0, 1.0], 1.0)
    >>> q.tolist(), rem
    ([-2.0, 1.0], 0.0)
    """
    c = np.asarray(coefficients)
    n = len(c) - 1
    if n < 1:
        raise ValueError("Polynomial of degree >= 1 required.")

    quotient = np.empty(n, dtype=np.result_type(c, root))
    carry = c[n]
    for j in range(n - 1, -1, -1):
        quotient[j] = carry
        carry = c[j] + carry * root

    return quotient, carry.item() if hasattr(carry, 'item') else carry
