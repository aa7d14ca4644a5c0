"""
Numeric (:mod:`pyzeros.numeric`)
================================

.. currentmodule:: pyzeros.numeric

Core numeric functions used by the solvers.

.. autosummary::
    :toctree:

    polynomial

"""
from .polynomial import (deflate, divided_difference, horner_derivs,
                         newton_poly, newton_poly_coeff, quadratic_roots)
