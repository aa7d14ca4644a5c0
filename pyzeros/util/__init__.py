"""
Utilities (:mod:`pyzeros.util`)
===============================

.. currentmodule:: pyzeros.util

.. autosummary::
    :toctree:

    print_styles
"""
from .print_styles import (FormatStyle, LevelDotStyle, LevelTabStyle,
                           PrintStyles, PrintStylesMixin, val2str)
