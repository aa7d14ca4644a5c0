#!usr/bin/env python3

# Roots of a polynomial found in two ways: all complex roots using
# Laguerre's method with deflation, and the real roots on an interval
# using the derivatives to split it into monotonic pieces.
# Written by Eric J. Whitney, May 2024.

import matplotlib.pyplot as plt
import numpy as np
from numpy.polynomial import Polynomial

from pyzeros.solve import LaguerreSolver, SolverType, solve_multi

# Example polynomial with three real roots and a complex pair (1 ± 1j
# from x**2 - 2x + 2).
p = Polynomial.fromroots([-2.5, -0.5, 1.5]) * Polynomial([2.0, -2.0, 1.0])

# ----------------------------------------------------------------------

solver = LaguerreSolver(absolute_accuracy=1e-12)
roots = solver.solve_all_complex(p.coef, 0.0)
print(f"All roots ({solver.evaluations} Laguerre steps):")
for z in sorted(roots, key=lambda z: (z.real, z.imag)):
    print(f"    {z.real:+.10f} {z.imag:+.10f}j")

x_lo, x_hi = -3.0, 3.0
zeros = solve_multi(p.deriv, x_lo, x_hi, p.degree(),
                    solver_type=SolverType.RIDDERS)
print(f"\nReal roots on [{x_lo}, {x_hi}]:")
print("    " + np.array2string(np.asarray(zeros), precision=10,
                               separator=', ', sign='+',
                               floatmode='fixed'))

# ----------------------------------------------------------------------

x_plt = np.linspace(x_lo, x_hi, 300)
plt.figure()
plt.plot(x_plt, p(x_plt), label='$p(x)$')
plt.plot(x_plt, p.deriv()(x_plt), '--', label="$p'(x)$")
plt.plot(zeros, np.zeros_like(zeros), 'o', label='Real roots')
plt.axhline(0.0, color='k', linewidth=0.5)
plt.xlabel('$x$')
plt.ylim(-40, 40)
plt.legend()
plt.grid()
plt.show()
