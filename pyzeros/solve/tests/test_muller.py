import math

import pytest
from pytest import approx

from pyzeros.solve import (InvalidIntervalError, MullerSolver,
                           MullerSolver2, NotBracketingError)

from .scalar_tst_functions import f, f_exact

# Real root of x**3 - 2x - 5 (Wallis' example).
WALLIS_ROOT = 2.0945514815423265


def _wallis(x):
    return x ** 3 - 2 * x - 5


# ======================================================================

def test_muller():
    solver = MullerSolver(absolute_accuracy=1e-10)
    x = solver.solve(100, _wallis, 2.0, 3.0)
    assert x == approx(WALLIS_ROOT, abs=1e-8)

    x = solver.solve(100, lambda x: math.exp(x) - 2, 0.0, 1.0)
    assert x == approx(math.log(2), abs=1e-8)

    # Root in the upper half of the interval.
    x = solver.solve(100, f, 0.0, 2.0, 0.5)
    assert x == approx(f_exact(x), abs=1e-8)


def test_muller_exact_start():
    solver = MullerSolver()
    x = solver.solve(100, lambda x: x - 1.5, 1.0, 2.0)
    assert x == 1.5
    assert solver.evaluations == 3


def test_muller_exact_zero_tolerance():
    solver = MullerSolver(function_value_accuracy=0.0)

    # Exact zero at each end and at the start value.
    assert solver.solve(100, lambda x: x - 1.0, 1.0, 3.0) == 1.0
    assert solver.evaluations == 1
    assert solver.solve(100, lambda x: x - 3.0, 1.0, 3.0) == 3.0
    assert solver.evaluations == 2
    assert solver.solve(100, lambda x: x - 1.5, 1.0, 2.0, 1.5) == 1.5
    assert solver.evaluations == 3


# ----------------------------------------------------------------------

@pytest.mark.parametrize('seed', [None, 0, 12345])
def test_muller2(seed):
    solver = MullerSolver2(absolute_accuracy=1e-10, seed=seed)
    x = solver.solve(100, _wallis, 2.0, 3.0)
    assert x == approx(WALLIS_ROOT, abs=1e-8)

    x = solver.solve(100, lambda x: math.exp(x) - 2, 0.0, 1.0)
    assert x == approx(math.log(2), abs=1e-8)


def test_muller2_invalid():
    solver = MullerSolver2()
    with pytest.raises(InvalidIntervalError):
        solver.solve(100, f, 2.0, 1.0)

    with pytest.raises(NotBracketingError):
        solver.solve(100, f, 2.0, 3.0)
