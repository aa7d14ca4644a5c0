import pytest
from pytest import approx

from pyzeros.solve import (AllowedSolution, BracketingNthOrderBrentSolver,
                           BrentSolver, NotBracketingError)

from .scalar_tst_functions import H_EXACT, f, f_exact, h


# ======================================================================

def test_brent():
    solver = BrentSolver(absolute_accuracy=1e-9)
    x = solver.solve(100, lambda x: x ** 2 - 2, 0.0, 2.0)
    assert x == approx(2 ** 0.5, abs=2e-9)
    assert solver.evaluations < 20


def test_brent_halves():
    solver = BrentSolver()

    # Root lies in the upper half [start, max].
    x = solver.solve(100, f, 0.0, 3.0, 0.5)
    assert x == approx(f_exact(x), abs=1e-6)

    # Neither half brackets a root.
    with pytest.raises(NotBracketingError):
        solver.solve(100, lambda x: x ** 2 + 1, -1.0, 2.0)

    # Decreasing function.
    x = solver.solve(100, lambda x: -f(x), 1.0, 2.0)
    assert x == approx(f_exact(x), abs=1e-6)


# ======================================================================

def test_nth_order_setup():
    assert BracketingNthOrderBrentSolver().maximal_order == 5
    assert (BracketingNthOrderBrentSolver(maximal_order=2).maximal_order
            == 2)

    with pytest.raises(ValueError):
        BracketingNthOrderBrentSolver(maximal_order=1)


@pytest.mark.parametrize('order', [2, 3, 5, 8])
def test_nth_order_accuracy(order):
    solver = BracketingNthOrderBrentSolver(absolute_accuracy=1e-10,
                                           maximal_order=order)
    x = solver.solve(100, f, 1.0, 2.0)
    assert x == approx(f_exact(x), abs=1e-9)


def test_nth_order_aging():
    # One end of the bracket would be retained indefinitely without
    # the aging mechanism.
    solver = BracketingNthOrderBrentSolver()
    x = solver.solve(100, h, 0.0, 1.5)
    assert x == approx(H_EXACT, abs=1e-6)
    assert solver.evaluations < 60


def test_nth_order_allowed_solution():
    solver = BracketingNthOrderBrentSolver(absolute_accuracy=1e-3)

    for fn in (f, lambda x: -f(x)):
        x = solver.solve(100, fn, 1.0, 2.0,
                         allowed=AllowedSolution.LEFT_SIDE)
        assert x <= f_exact(x)
        assert x == approx(f_exact(x), abs=1e-3)

        x = solver.solve(100, fn, 1.0, 2.0,
                         allowed=AllowedSolution.RIGHT_SIDE)
        assert x >= f_exact(x)
        assert x == approx(f_exact(x), abs=1e-3)

        x = solver.solve(100, fn, 1.0, 2.0,
                         allowed=AllowedSolution.BELOW_SIDE)
        assert fn(x) <= 0.0

        x = solver.solve(100, fn, 1.0, 2.0,
                         allowed=AllowedSolution.ABOVE_SIDE)
        assert fn(x) >= 0.0
