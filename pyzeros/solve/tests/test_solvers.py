"""
Behaviour common to all real-valued solvers.
"""

import numpy as np
import pytest
from numpy.polynomial import Polynomial
from pytest import approx

from pyzeros.solve import (BisectionSolver, BracketingNthOrderBrentSolver,
                           BrentSolver, IllinoisSolver, InvalidIntervalError,
                           LaguerreSolver, MullerSolver, MullerSolver2,
                           NotBracketingError, NullFunctionError,
                           PegasusSolver, RegulaFalsiSolver, RiddersSolver,
                           SecantSolver, TooManyEvaluationsError)

from .scalar_tst_functions import G_EXACT, f, f_exact, g

# Solvers converging on f(x) = x**2 - x - 1 with default function
# value accuracy.  Regula Falsi is covered separately.
CONVERGING = [BisectionSolver, BracketingNthOrderBrentSolver, BrentSolver,
              IllinoisSolver, MullerSolver, MullerSolver2, PegasusSolver,
              RiddersSolver, SecantSolver]

ALL_BRACKETING = CONVERGING + [RegulaFalsiSolver]

# Solvers that keep the root bracketed throughout.
BRACKET_KEEPING = [BisectionSolver, BracketingNthOrderBrentSolver,
                   BrentSolver, IllinoisSolver, MullerSolver, PegasusSolver,
                   RiddersSolver]


# ======================================================================

@pytest.mark.parametrize('solver_class', CONVERGING)
def test_accuracy(solver_class):
    solver = solver_class(absolute_accuracy=1e-10)
    x = solver.solve(200, f, 1.0, 2.0)
    assert x == approx(f_exact(x), abs=1e-8)
    assert solver.evaluations <= solver.max_evaluations == 200

    # Problem is retained until the next solve.
    assert (solver.min, solver.max, solver.start_value) == (1.0, 2.0, 1.5)
    assert solver.function is f


@pytest.mark.parametrize('solver_class', BRACKET_KEEPING)
def test_double_root(solver_class):
    # Single root at -3 with a double root (no sign change) at 1.
    solver = solver_class()
    x = solver.solve(1000, g, -4.0, 0.0)
    assert x == approx(G_EXACT, abs=1e-5)


@pytest.mark.parametrize('solver_class', ALL_BRACKETING)
def test_exact_root_at_min(solver_class):
    solver = solver_class()
    x = solver.solve(100, lambda x: x - 1.0, 1.0, 3.0)
    assert x == 1.0
    assert solver.evaluations <= 3


@pytest.mark.parametrize('solver_class', ALL_BRACKETING)
def test_exact_root_zero_tolerance(solver_class):
    # Only an exactly zero function value is accepted.
    solver = solver_class(function_value_accuracy=0.0)
    x = solver.solve(100, lambda x: x - 1.0, 1.0, 3.0)
    assert x == 1.0
    assert solver.evaluations <= 3


@pytest.mark.parametrize('fn', [f, lambda x: -f(x)])
@pytest.mark.parametrize('solver_class',
                         [BisectionSolver, IllinoisSolver, PegasusSolver])
def test_bracket_maintained(solver_class, fn):
    points = []

    def recorded(x):
        points.append(x)
        return fn(x)

    solver = solver_class(absolute_accuracy=1e-10)
    x = solver.solve(200, recorded, 1.0, 2.0)

    # Replay the evaluated points.  Each new point must fall strictly
    # inside the current bracket, which then shrinks to the side where
    # the sign changes.
    lo, hi = 1.0, 2.0
    for xk in points:
        if xk in (lo, hi):
            continue  # Re-evaluated bound.

        assert lo < xk < hi
        if np.sign(fn(lo)) * np.sign(fn(xk)) <= 0:
            hi = xk
        else:
            lo = xk
        assert np.sign(fn(lo)) * np.sign(fn(hi)) <= 0

    assert lo <= x <= hi
    assert x == approx(f_exact(x), abs=1e-8)


@pytest.mark.parametrize('solver_class', ALL_BRACKETING)
def test_not_bracketing(solver_class):
    solver = solver_class()
    with pytest.raises(NotBracketingError):
        solver.solve(100, lambda x: x, 1.0, 2.0)

    # Also usable as a ValueError.
    with pytest.raises(ValueError):
        solver.solve(100, lambda x: x, 1.0, 2.0)


def test_not_bracketing_laguerre():
    with pytest.raises(NotBracketingError):
        LaguerreSolver().solve(100, Polynomial([0.0, 1.0]), 1.0, 2.0)


@pytest.mark.parametrize('solver_class', ALL_BRACKETING)
def test_invalid_problem(solver_class):
    solver = solver_class()
    with pytest.raises(InvalidIntervalError):
        solver.solve(100, f, 2.0, 1.0)

    with pytest.raises(NullFunctionError):
        solver.solve(100, None, 1.0, 2.0)

    with pytest.raises(TypeError):
        solver.solve(100, 3.0, 1.0, 2.0)


@pytest.mark.parametrize('solver_class', ALL_BRACKETING)
def test_budget(solver_class):
    solver = solver_class(absolute_accuracy=1e-12)
    with pytest.raises(TooManyEvaluationsError) as exc_info:
        solver.solve(4, f, 1.0, 2.0)

    assert exc_info.value.max_eval == 4
    assert solver.evaluations == 4

    # Budget is reset for each solve.
    solver.solve(200, lambda x: x - 1.0, 1.0, 3.0)
    assert solver.evaluations <= 3


def test_start_value():
    # Start value must lie strictly inside the interval.
    for solver in (BrentSolver(), MullerSolver(),
                   BracketingNthOrderBrentSolver()):
        with pytest.raises(InvalidIntervalError):
            solver.solve(100, f, 1.0, 2.0, 2.0)

    # Brent only needs the half of the interval containing the root.
    solver = BrentSolver()
    x = solver.solve(100, f, 0.0, 10.0, 1.0)
    assert x == approx(f_exact(x), abs=1e-6)


# ----------------------------------------------------------------------

def test_display(capsys):
    solver = BisectionSolver(display_level=2)
    solver.solve(100, f, 1.0, 2.0)
    out = capsys.readouterr().out
    assert "BisectionSolver: Solving on [1.0, 2.0]" in out
    assert "... Evaluation 1: f(+1.000000E+00) = -1.000000E+00" in out
    assert "Result x = +1.61803" in out

    solver.display_level = 1
    solver.solve(100, f, 1.0, 2.0)
    out = capsys.readouterr().out
    assert "Result x" in out and "Evaluation" not in out

    BisectionSolver().solve(100, f, 1.0, 2.0)
    assert capsys.readouterr().out == ""
