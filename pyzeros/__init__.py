"""
.. This module acts as the top-level API documentation.

.. module: pyzeros

PyZeros finds zeros of scalar functions :math:`f(x) = 0` on (or near) a
given interval, using a family of iterative solvers that share a common
accuracy and evaluation budget contract.

Subpackages
-----------

- `pyzeros.solve`: Univariate solvers and bracketing utilities.
- `pyzeros.numeric`: Supporting polynomial operations.
- `pyzeros.util`: Printed progress output.
"""

__version__ = "0.1.0"

import sys

# Written by Eric J. Whitney, November 2019.

# ======================================================================

assert sys.version_info >= (3, 10)

from pyzeros.solve import (AllowedSolution, BisectionSolver,
                           BracketingNthOrderBrentSolver, BrentSolver,
                           IllinoisSolver, LaguerreSolver, MullerSolver,
                           MullerSolver2, NewtonRaphsonSolver,
                           PegasusSolver, RegulaFalsiSolver, RiddersSolver,
                           SecantSolver, SolverError, solve_multi,
                           solve_root)
