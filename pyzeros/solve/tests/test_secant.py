import pytest
from pytest import approx

from pyzeros.solve import (AllowedSolution, IllinoisSolver, PegasusSolver,
                           RegulaFalsiSolver, SecantMethod, SecantSolver,
                           StagnationError, TooManyEvaluationsError)

from .scalar_tst_functions import H_EXACT, f, f_exact, h


# ======================================================================

def test_methods():
    assert RegulaFalsiSolver().method == SecantMethod.REGULA_FALSI
    assert IllinoisSolver().method == SecantMethod.ILLINOIS
    assert PegasusSolver().method == SecantMethod.PEGASUS


def test_regula_falsi():
    solver = RegulaFalsiSolver()

    # Exact in one step for a straight line.
    x = solver.solve(100, lambda x: 2 * x - 1, 0.0, 1.0)
    assert x == 0.5
    assert solver.evaluations == 3

    # Linear convergence with a relaxed function value accuracy.
    solver = RegulaFalsiSolver(function_value_accuracy=1e-10)
    x = solver.solve(200, f, 1.0, 2.0)
    assert abs(f(x)) <= 1e-10
    assert x == approx(f_exact(x), abs=1e-9)


def test_illinois_vs_regula_falsi():
    # Illinois converges on x**10 - 1 in far fewer evaluations than
    # plain Regula Falsi, which keeps one bound fixed.
    illinois = IllinoisSolver()
    x = illinois.solve(1000, h, 0.0, 1.5)
    assert x == approx(H_EXACT, abs=1e-6)
    ill_evals = illinois.evaluations

    regula_falsi = RegulaFalsiSolver()
    try:
        regula_falsi.solve(1000, h, 0.0, 1.5)
    except (StagnationError, TooManyEvaluationsError):
        pass
    rf_evals = regula_falsi.evaluations

    assert ill_evals * 3 < rf_evals


@pytest.mark.parametrize('solver_class', [IllinoisSolver, PegasusSolver])
def test_allowed_solution(solver_class):
    # Use a coarse accuracy so that the side of the root matters.
    solver = solver_class(absolute_accuracy=1e-3,
                          function_value_accuracy=1e-4)

    for lo, hi, fn in ((1.0, 2.0, f), (1.0, 2.0, lambda x: -f(x))):
        x = solver.solve(500, fn, lo, hi, allowed=AllowedSolution.LEFT_SIDE)
        assert x <= f_exact(x)
        assert solver.allowed_solution == AllowedSolution.LEFT_SIDE

        x = solver.solve(500, fn, lo, hi,
                         allowed=AllowedSolution.RIGHT_SIDE)
        assert x >= f_exact(x)

        x = solver.solve(500, fn, lo, hi,
                         allowed=AllowedSolution.BELOW_SIDE)
        assert fn(x) <= 0.0

        x = solver.solve(500, fn, lo, hi,
                         allowed=AllowedSolution.ABOVE_SIDE)
        assert fn(x) >= 0.0

        x = solver.solve(500, fn, lo, hi)
        assert x == approx(f_exact(x), abs=1e-3)
        assert solver.allowed_solution == AllowedSolution.ANY_SIDE


def test_secant():
    solver = SecantSolver(absolute_accuracy=1e-12)
    x = solver.solve(100, f, 1.0, 2.0)
    assert x == approx(f_exact(x), abs=1e-12)

    # The secant method converges faster than bisection would.
    assert solver.evaluations < 20
