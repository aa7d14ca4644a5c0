#!usr/bin/env python3

# Compare the scalar solvers on a few standard problems.
# Written by Eric J. Whitney, May 2024.

import numpy as np

from pyzeros.solve import (BisectionSolver, BracketingNthOrderBrentSolver,
                           BrentSolver, IllinoisSolver, MullerSolver,
                           MullerSolver2, PegasusSolver, RegulaFalsiSolver,
                           RiddersSolver, SecantSolver, SolverError)

# Each problem is (name, function, lower bound, upper bound).
problems = [
    ("x**2 - x - 1", lambda x: x ** 2 - x - 1, 1.0, 2.0),
    ("x**3 - 2x - 5", lambda x: x ** 3 - 2 * x - 5, 2.0, 3.0),
    ("cos(x) - x", lambda x: np.cos(x) - x, 0.0, 1.0),
    ("x**10 - 1", lambda x: x ** 10 - 1, 0.0, 1.5),
    ("exp(x) - 2", lambda x: np.exp(x) - 2, -4.0, 4.0),
]

solvers = [BisectionSolver, BrentSolver, BracketingNthOrderBrentSolver,
           RegulaFalsiSolver, IllinoisSolver, PegasusSolver, SecantSolver,
           RiddersSolver, MullerSolver, MullerSolver2]

# ----------------------------------------------------------------------

print(f"{'Solver':<32s}" + "".join(f"{p[0]:>16s}" for p in problems))
for solver_class in solvers:
    solver = solver_class(absolute_accuracy=1e-10)
    line = f"{solver_class.__name__:<32s}"
    for _, f, lo, hi in problems:
        try:
            solver.solve(1000, f, lo, hi)
            line += f"{solver.evaluations:>16d}"
        except SolverError as e:
            line += f"{'Failed (' + str(e.flag) + ')':>16s}"

    print(line)

# Show the individual steps for one case.
print()
BrentSolver(display_level=2).solve(100, problems[1][1], 2.0, 3.0)
