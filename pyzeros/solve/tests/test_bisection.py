import math
from unittest import TestCase

from .scalar_tst_functions import f, f_exact


# ======================================================================

class TestBisectionSolver(TestCase):
    def test_bisection(self):
        from pyzeros.solve import BisectionSolver

        # Check normal operation.
        solver = BisectionSolver(absolute_accuracy=1e-14)
        x = solver.solve(200, f, 1.0, 2.0)
        self.assertAlmostEqual(x, f_exact(x), places=13)

        # Check failure to converge is flagged.
        with self.assertRaises(RuntimeError):
            solver.solve(10, f, 1.0, 2.0)

    def test_cos(self):
        from pyzeros.solve import BisectionSolver

        solver = BisectionSolver()
        x = solver.solve(100, math.cos, 0.0, 2.0)
        self.assertAlmostEqual(x, math.pi / 2, places=6)
        self.assertLessEqual(abs(x - math.pi / 2), 1e-6)

        # Two evaluations per halving of the interval.
        self.assertEqual(solver.evaluations, 2 * 21)

    def test_exact_midpoint(self):
        from pyzeros.solve import BisectionSolver

        solver = BisectionSolver()
        x = solver.solve(100, lambda x: (2 * x - 1) * (x - 3), 0.0, 1.0)
        self.assertEqual(x, 0.5)
        self.assertEqual(solver.evaluations, 2)
