import numpy as np
import pytest
from pytest import approx

from pyzeros.solve.accuracy import Accuracy, Evaluations


# ======================================================================

def test_accuracy():
    acc = Accuracy(relative=1e-6, absolute=1e-3, function_value=1e-12)
    assert acc.tolerance(10.0) == approx(1e-3)
    assert acc.tolerance(-1e4) == approx(1e-2)

    with pytest.raises(AttributeError):
        acc.absolute = 1.0  # Frozen.

    for bad in (-1e-6, np.nan):
        with pytest.raises(ValueError):
            Accuracy(relative=bad, absolute=1e-6, function_value=0.0)
        with pytest.raises(ValueError):
            Accuracy(relative=0.0, absolute=bad, function_value=0.0)
        with pytest.raises(ValueError):
            Accuracy(relative=0.0, absolute=1e-6, function_value=bad)


# ----------------------------------------------------------------------

def test_evaluations():
    budget = Evaluations(3)
    assert budget.count == 0 and budget.max_count == 3

    for _ in range(3):
        assert budget.can_increment()
        assert budget.try_increment()

    # Refused attempts leave the count unchanged.
    assert not budget.can_increment()
    assert not budget.try_increment()
    assert budget.count == 3

    budget.reset()
    assert budget.count == 0 and budget.max_count == 3

    budget.reset(0)
    assert not budget.try_increment()
    assert budget.count == 0

    with pytest.raises(ValueError):
        budget.reset(-1)
