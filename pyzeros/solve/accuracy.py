"""
Accuracy policy and evaluation budget shared by all solvers.
"""

from __future__ import annotations

from dataclasses import dataclass


# Written by Eric J. Whitney, May 2024.

# ======================================================================

@dataclass(frozen=True)
class Accuracy:
    """
    The three tolerances that jointly define when a solver is close
    enough to a zero.  A returned root `x` satisfies either
    ``|f(x)| <= function_value`` or has a final bracket width no larger
    than ``tolerance(x)``.

    Parameters
    ----------
    relative : float
        Relative accuracy (multiplies `|x|`).
    absolute : float
        Absolute accuracy in `x`.
    function_value : float
        Accuracy in `f(x)`.

    Examples
    --------
    >>> acc = Accuracy(relative=1e-3, absolute=1e-6, function_value=0.0)
    >>> acc.tolerance(100.0)
    0.1
    >>> acc.tolerance(0.0)
    1e-06
    """
    relative: float
    absolute: float
    function_value: float

    def __post_init__(self):
        for name in ('relative', 'absolute', 'function_value'):
            if not getattr(self, name) >= 0:  # Also rejects NaN.
                raise ValueError(f"Accuracy '{name}' must be >= 0, got "
                                 f"{getattr(self, name)}.")

    def tolerance(self, x: float) -> float:
        """Return ``max(relative * |x|, absolute)``."""
        return max(self.relative * abs(x), self.absolute)


# ----------------------------------------------------------------------

class Evaluations:
    """
    Counter bounding the number of function evaluations permitted
    during one `solve` call.  The count never exceeds `max_count`; an
    attempt to go past it is refused and reported to the caller.

    Parameters
    ----------
    max_count : int, default = 0
        Maximum number of evaluations.

    Examples
    --------
    >>> budget = Evaluations(2)
    >>> budget.try_increment(), budget.try_increment()
    (True, True)
    >>> budget.try_increment()
    False
    >>> budget.count
    2
    """

    def __init__(self, max_count: int = 0):
        self._count = 0
        self._max_count = max_count

    def __repr__(self):
        return f"Evaluations(count={self._count}, " \
               f"max_count={self._max_count})"

    # -- Public Methods ------------------------------------------------

    @property
    def count(self) -> int:
        """Number of evaluations used so far."""
        return self._count

    def can_increment(self) -> bool:
        """Returns `True` if at least one more evaluation is allowed."""
        return self._count < self._max_count

    @property
    def max_count(self) -> int:
        """Maximum number of evaluations."""
        return self._max_count

    def reset(self, max_count: int = None):
        """
        Set the count back to zero and optionally set a new
        `max_count`.
        """
        if max_count is not None:
            if max_count < 0:
                raise ValueError(f"Maximum evaluation count must be "
                                 f">= 0, got {max_count}.")
            self._max_count = max_count
        self._count = 0

    def try_increment(self) -> bool:
        """
        Increment the count if allowed.

        Returns
        -------
        bool
            `True` if the count was incremented, `False` if the budget
            is already exhausted (the count is left unchanged).
        """
        if not self.can_increment():
            return False

        self._count += 1
        return True
