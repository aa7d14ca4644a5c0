"""
Abstract definition of a univariate solver.  A solver instance holds
its accuracy policy for its lifetime; the function, interval, start
value and evaluation budget are replaced on every call to `solve()`.

Notes
-----
A solver instance is not safe for concurrent use.  Use one instance
per thread (or per call).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

import numpy as np

from pyzeros.solve.accuracy import Accuracy, Evaluations
from pyzeros.solve.bracket import (is_bracketing, is_sequence, midpoint,
                                   verify_bracketing, verify_interval,
                                   verify_sequence)
from pyzeros.solve.exception import (NullFunctionError,
                                     TooManyEvaluationsError)
from pyzeros.util.print_styles import (LevelDotStyle, LevelTabStyle,
                                       PrintStylesMixin, val2str)


# Written by Eric J. Whitney, May 2024.

# ======================================================================

class AllowedSolution(Enum):
    """
    Which side of the true root an approximate (non-exact) solution
    may lie on.  For a returned value `x` and true root `x*`:

    - ``ANY_SIDE``: No restriction.
    - ``LEFT_SIDE``: :math:`x \\le x^*`.
    - ``RIGHT_SIDE``: :math:`x \\ge x^*`.
    - ``BELOW_SIDE``: :math:`f(x) \\le 0`.
    - ``ABOVE_SIDE``: :math:`f(x) \\ge 0`.
    """
    ANY_SIDE = 0
    LEFT_SIDE = 1
    RIGHT_SIDE = 2
    BELOW_SIDE = 3
    ABOVE_SIDE = 4


# ======================================================================

class UnivariateSolver(PrintStylesMixin, ABC):
    """
    Base class for solvers finding a zero of a scalar function
    :math:`f(x) = 0`.

    Derived classes implement `_do_solve()`, which must obtain every
    function value through `_compute_objective_value()` so that the
    evaluation budget is enforced.

    Parameters
    ----------
    absolute_accuracy : float, default = 1e-6
        Absolute accuracy in `x`.
    relative_accuracy : float, default = 1e-14
        Relative accuracy in `x`.
    function_value_accuracy : float, default = 1e-15
        Accuracy in `f(x)`.
    display_level : int, default = 0
        Printed output: ``0`` is silent, ``1`` shows the problem and
        result, ``2`` also shows every function evaluation.
    """
    DEFAULT_ABSOLUTE_ACCURACY = 1e-6
    DEFAULT_RELATIVE_ACCURACY = 1e-14
    DEFAULT_FUNCTION_VALUE_ACCURACY = 1e-15

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None, *,
                 display_level: int = 0, **kwargs):
        super().__init__(display_level=display_level, **kwargs)

        def _default(value, default):
            return default if value is None else value

        self._accuracy = Accuracy(
            relative=_default(relative_accuracy,
                              self.DEFAULT_RELATIVE_ACCURACY),
            absolute=_default(absolute_accuracy,
                              self.DEFAULT_ABSOLUTE_ACCURACY),
            function_value=_default(function_value_accuracy,
                                    self.DEFAULT_FUNCTION_VALUE_ACCURACY))
        self._evaluations = Evaluations()
        self._function = None
        self._search_min = np.nan
        self._search_max = np.nan
        self._search_start = np.nan

        self.pstyles.add('Solver_1', LevelTabStyle())
        self.pstyles.add('Solver_2', LevelDotStyle(), parent='Solver_1')

    def __repr__(self):
        return f"{type(self).__name__}({self._accuracy})"

    # -- Public Methods ------------------------------------------------

    @property
    def absolute_accuracy(self) -> float:
        return self._accuracy.absolute

    @property
    def accuracy(self) -> Accuracy:
        """The accuracy policy."""
        return self._accuracy

    @property
    def evaluations(self) -> int:
        """Number of evaluations used by the most recent `solve`."""
        return self._evaluations.count

    @property
    def function(self) -> Callable | None:
        return self._function

    @property
    def function_value_accuracy(self) -> float:
        return self._accuracy.function_value

    @property
    def max(self) -> float:
        """Upper end of the search interval."""
        return self._search_max

    @property
    def max_evaluations(self) -> int:
        """Evaluation budget of the most recent `solve`."""
        return self._evaluations.max_count

    @property
    def min(self) -> float:
        """Lower end of the search interval."""
        return self._search_min

    @property
    def relative_accuracy(self) -> float:
        return self._accuracy.relative

    def solve(self, max_eval: int, f: Callable[[float], float],
              lo: float = np.nan, hi: float = np.nan,
              start_value: float = None) -> float:
        """
        Find a zero of `f`.

        Parameters
        ----------
        max_eval : int
            Maximum number of function evaluations.
        f : Callable[[float], float]
            Scalar function.  This should be deterministic and free of
            side effects.
        lo, hi : float, default = NaN
            Search interval.  These are omitted only for solvers that
            just use a start value.
        start_value : float, optional
            Starting point.  If omitted the midpoint of [`lo`, `hi`] is
            used.

        Returns
        -------
        float
            Approximate zero of `f`.

        Raises
        ------
        NullFunctionError
            If `f` is `None` or not callable.
        InvalidIntervalError, NotBracketingError
            If the interval is unsuitable (depending on the algorithm).
        TooManyEvaluationsError
            If `max_eval` is exceeded.
        SolverError
            Other algorithm-specific failures.
        """
        if start_value is None:
            start_value = midpoint(lo, hi)

        self._setup(max_eval, f, lo, hi, start_value)
        if self.display_level >= 1:
            self.pstyles.print('Solver_1', f"{type(self).__name__}: Solving "
                                           f"on [{lo}, {hi}], start = "
                                           f"{start_value}:")

        x = self._do_solve()

        if self.display_level >= 1:
            self.pstyles.print('Solver_1', f"Result x = {val2str(x)} "
                                           f"after {self.evaluations} "
                                           f"evaluations.")
        return x

    @property
    def start_value(self) -> float:
        return self._search_start

    # -- Private Methods -----------------------------------------------

    def _compute_objective_value(self, x: float) -> float:
        """
        Charge one evaluation against the budget then return `f(x)`.

        Raises
        ------
        TooManyEvaluationsError
            If the budget is exhausted.
        """
        self._increment_evaluation_count()
        y = self._function(x)
        if self.display_level >= 2:
            self.pstyles.print('Solver_2', f"Evaluation {self.evaluations}: "
                                           f"f({val2str(x)}) = {val2str(y)}")
        return y

    @abstractmethod
    def _do_solve(self) -> float:
        """Algorithm-specific search, using the stored problem."""
        raise NotImplementedError

    def _increment_evaluation_count(self):
        if not self._evaluations.try_increment():
            raise TooManyEvaluationsError(self._evaluations.max_count)

    def _is_bracketing(self, lo: float, hi: float) -> bool:
        return is_bracketing(self._function, lo, hi)

    @staticmethod
    def _is_sequence(lo: float, mid: float, hi: float) -> bool:
        return is_sequence(lo, mid, hi)

    def _setup(self, max_eval: int, f: Callable, lo: float, hi: float,
               start_value: float):
        if f is None or not callable(f):
            raise NullFunctionError()

        self._search_min, self._search_max = lo, hi
        self._search_start = start_value
        self._function = f
        self._evaluations.reset(max_eval)

    def _verify_bracketing(self, lo: float, hi: float):
        verify_bracketing(self._function, lo, hi)

    @staticmethod
    def _verify_interval(lo: float, hi: float):
        verify_interval(lo, hi)

    @staticmethod
    def _verify_sequence(lo: float, mid: float, hi: float):
        verify_sequence(lo, mid, hi)


# ----------------------------------------------------------------------

class BracketedUnivariateSolver(UnivariateSolver, ABC):
    """
    Solver that keeps the root bracketed throughout, so that an
    approximate result can be restricted to one side of the true root
    using `AllowedSolution`.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._allowed = AllowedSolution.ANY_SIDE

    # -- Public Methods ------------------------------------------------

    @property
    def allowed_solution(self) -> AllowedSolution:
        """Side restriction used by the most recent `solve`."""
        return self._allowed

    def solve(self, max_eval: int, f: Callable[[float], float],
              lo: float = np.nan, hi: float = np.nan,
              start_value: float = None, *,
              allowed: AllowedSolution = AllowedSolution.ANY_SIDE
              ) -> float:
        """
        As per `UnivariateSolver.solve`, with the additional parameter:

        Parameters
        ----------
        allowed : AllowedSolution, default = ANY_SIDE
            Side of the true root where an approximate result may lie.
        """
        self._allowed = allowed
        return super().solve(max_eval, f, lo, hi, start_value)

