import numpy as np


# ======================================================================

# Define test functions, along with first and second derivatives.  For
# use on scalars or element-wise on arrays.

def f(x):
    return x ** 2 - x - 1


def df_dx(x):
    return 2 * x - 1


def df2_dx2(x):
    return 2 * np.ones_like(x)


def f_exact(x):
    return 1.618033988749895 * np.ones_like(x)


# ----------------------------------------------------------------------

# Double root at x = 1, single root at x = -3.

def g(x):
    return (x + 3.0) * (x - 1.0) * (x - 1.0)


def dg_dx(x):
    return 2.0 * (x - 1.0) * (x + 3.0) + (x - 1.0) * (x - 1.0)


G_EXACT = -3.0


# ----------------------------------------------------------------------

# Steep function on which plain Regula Falsi stalls.

def h(x):
    return x ** 10 - 1


H_EXACT = 1.0
