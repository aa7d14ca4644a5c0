import math

import numpy as np
import numpy.polynomial.polynomial as npoly
import pytest
from numpy.polynomial import Polynomial
from numpy.testing import assert_allclose
from pytest import approx

from pyzeros.solve import (EmptyPolynomialError, LaguerreSolver,
                           TooManyEvaluationsError)

# (x - 1)(x - 2)(x - 3).
CUBIC = [-6.0, 11.0, -6.0, 1.0]


# ======================================================================

def test_solve_real():
    solver = LaguerreSolver()

    # Coefficients or a Polynomial are accepted.
    for p in (CUBIC, Polynomial(CUBIC)):
        x = solver.solve(100, p, 1.5, 2.7)
        assert x == approx(2.0, abs=1e-6)
        assert_allclose(solver.coefficients, CUBIC)

    # A Polynomial with a non-default domain is converted first.
    p = Polynomial.fromroots([-1.0, 0.5]).convert(domain=[0.0, 4.0])
    x = solver.solve(100, p, 0.0, 1.2)
    assert x == approx(0.5, abs=1e-6)


def test_solve_all_complex():
    solver = LaguerreSolver()
    c = np.array(CUBIC)

    roots = solver.solve_all_complex(c, 0.0)
    assert len(roots) == 3
    assert sorted(roots.real) == approx([1.0, 2.0, 3.0], abs=1e-8)
    assert roots.imag == approx([0.0, 0.0, 0.0], abs=1e-8)

    # Original coefficients are left alone.
    assert_allclose(c, CUBIC)
    assert_allclose(solver.coefficients, CUBIC)

    # The roots rebuild the polynomial.
    c = npoly.polyfromroots([-2.0, 0.5, 1.5, 4.0])
    roots = solver.solve_all_complex(c, 0.0)
    assert_allclose(npoly.polyfromroots(roots).real, c, atol=1e-6)


def test_solve_complex():
    solver = LaguerreSolver()

    # x**2 + 1 has no real roots.
    z = solver.solve_complex([1.0, 0.0, 1.0], 0.0)
    assert abs(z.imag) == approx(1.0, abs=1e-12)
    assert z.real == approx(0.0, abs=1e-12)

    roots = solver.solve_all_complex([1.0, 0.0, 1.0], 0.0)
    assert sorted(roots, key=lambda r: r.imag) == approx([-1j, 1j],
                                                         abs=1e-10)

    # Real root of x**3 + 1, starting where the derivatives vanish.
    roots = solver.solve_all_complex([1.0, 0.0, 0.0, 1.0], 0.0)
    real_roots = [r.real for r in roots if abs(r.imag) < 1e-6]
    assert real_roots == approx([-1.0], abs=1e-6)


def test_laguerre_no_real_root():
    solver = LaguerreSolver()
    solver.solve_complex([1.0, 0.0, 1.0], 0.0)

    with pytest.warns(RuntimeWarning):
        x = solver.laguerre(-1.0, 1.0, 1.0, 1.0)
    assert np.isnan(x)


# ----------------------------------------------------------------------

def test_laguerre_failures():
    solver = LaguerreSolver()

    with pytest.raises(EmptyPolynomialError):
        solver.solve(10, [3.0], 0.0, 1.0)
    with pytest.raises(EmptyPolynomialError):
        solver.solve_complex([3.0], 0.0)
    with pytest.raises(EmptyPolynomialError):
        solver.solve_all_complex(Polynomial([3.0]), 0.0)

    # General functions are refused.
    with pytest.raises(TypeError):
        solver.solve(10, math.cos, 0.0, 1.0)

    with pytest.raises(TooManyEvaluationsError):
        solver.solve_complex(CUBIC, 0.0, max_eval=1)
