"""
===============================
Solvers (:mod:`pyzeros.solve`)
===============================

.. currentmodule:: pyzeros.solve

Solvers for finding a zero of a scalar function :math:`f(x) = 0` on, or
near, a given interval.  All solvers share the same accuracy policy and
are limited by an evaluation budget given on each call to `solve()`.

Solvers
-------

.. autosummary::
    :toctree:

    BisectionSolver
    BracketingNthOrderBrentSolver
    BrentSolver
    IllinoisSolver
    LaguerreSolver
    MullerSolver
    MullerSolver2
    NewtonRaphsonSolver
    PegasusSolver
    RegulaFalsiSolver
    RiddersSolver
    SecantSolver

Base Classes
------------

.. autosummary::
    :toctree:

    UnivariateSolver
    BracketedUnivariateSolver
    AllowedSolution
    Accuracy
    Evaluations

Functions
---------

.. autosummary::
    :toctree:

    bracket
    force_side
    is_bracketing
    make_solver
    midpoint
    solve_multi
    solve_root
    verify_bracketing
    verify_interval
    verify_sequence

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    EmptyPolynomialError
    InvalidIntervalError
    NotBracketingError
    NullFunctionError
    StagnationError
    TooManyEvaluationsError
    ZeroDerivativeError

"""

from .accuracy import Accuracy, Evaluations
from .base import (AllowedSolution, BracketedUnivariateSolver,
                   UnivariateSolver)
from .bisection import BisectionSolver
from .bracket import (bracket, force_side, is_bracketing, is_sequence,
                      midpoint, verify_bracketing, verify_interval,
                      verify_sequence)
from .brent import BracketingNthOrderBrentSolver, BrentSolver
from .convenience import SolverType, make_solver, solve_multi, solve_root
from .exception import (EmptyPolynomialError, InvalidIntervalError,
                        NotBracketingError, NullFunctionError,
                        SolverError, StagnationError,
                        TooManyEvaluationsError, ZeroDerivativeError)
from .laguerre import LaguerreSolver
from .muller import MullerSolver, MullerSolver2
from .newton import DifferentiableFunction, NewtonRaphsonSolver
from .ridders import RiddersSolver
from .secant import (BaseSecantSolver, IllinoisSolver, PegasusSolver,
                     RegulaFalsiSolver, SecantMethod, SecantSolver)
