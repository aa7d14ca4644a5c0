"""
Exceptions raised by the solvers in `pyzeros.solve`.  All failures
derive from `SolverError`; where a failure is also a bad argument
(e.g. an empty interval) the matching builtin exception is included as
a base class so that it may be caught as usual.
"""


# Written by Eric J. Whitney, April 2023.


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when an algorithm / solver / etc fails to
    converge or find a solution.  Additional information (optional) is
    included to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result.  Each subclass below uses a fixed, non-zero flag.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class InvalidIntervalError(SolverError, ValueError):
    """
    Raised if ``lo >= hi``, or if a start value does not lie strictly
    inside the interval.  Attributes `lo`, `hi` give the offending
    pair.
    """

    def __init__(self, lo: float, hi: float, **kwargs):
        super().__init__(f"Endpoints do not specify an interval: "
                         f"[{lo}, {hi}].", flag=1,
                         details="Requires lo < hi.", lo=lo, hi=hi,
                         **kwargs)


class NotBracketingError(SolverError, ValueError):
    """
    Raised if the function values at the ends of the interval do not
    straddle a sign change.  Attributes `lo`, `hi`, `f_lo`, `f_hi` give
    the interval and function values.
    """

    def __init__(self, lo: float, hi: float, f_lo: float, f_hi: float,
                 details: str = "Function values at endpoints do not "
                                "have different signs.", **kwargs):
        super().__init__(f"Interval [{lo}, {hi}] does not bracket a "
                         f"root.", flag=2, details=details, lo=lo, hi=hi,
                         f_lo=f_lo, f_hi=f_hi, **kwargs)


class TooManyEvaluationsError(SolverError):
    """
    Raised when the evaluation budget is exhausted before convergence.
    Attribute `max_eval` gives the budget.
    """

    def __init__(self, max_eval: int):
        super().__init__(f"Exceeded maximum number of function "
                         f"evaluations ({max_eval}).", flag=3,
                         max_eval=max_eval)


class NullFunctionError(SolverError, TypeError):
    """Raised if no function (or a non-callable object) is supplied."""

    def __init__(self):
        super().__init__("Function must be supplied.", flag=4)


class StagnationError(SolverError):
    """
    Raised when successive iterates stop moving (Regula Falsi).
    Attribute `x` gives the repeated point.
    """

    def __init__(self, x: float):
        super().__init__("Solver failed to converge:", flag=5,
                         details="Iterates are no longer making "
                                 "progress.", x=x)


class EmptyPolynomialError(SolverError, ValueError):
    """
    Raised if a polynomial solver is given a constant (degree zero)
    polynomial.
    """

    def __init__(self, coefficients):
        super().__init__("Polynomial of degree >= 1 required.", flag=6,
                         coefficients=coefficients)


class ZeroDerivativeError(SolverError):
    """
    Raised when a derivative-based step cannot be taken because the
    derivative is zero.  Attribute `x` gives the point.
    """

    def __init__(self, x: float):
        super().__init__("Derivative was zero.", flag=7,
                         details="Reached a level state, df/dx = 0.", x=x)
