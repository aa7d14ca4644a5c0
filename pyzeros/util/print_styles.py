"""
Indented progress output for iterative algorithms.  Each named style
sits at a nesting level (1 = top) and a line printed using that style
only appears when its level is within the current display level, so
that detail can be turned up or down without changing calling code.
"""

from __future__ import annotations

import warnings


# Written by Eric J. Whitney, February 2024.


# ======================================================================


class FormatStyle:
    """
    Base class for a line style.  An optional `parent` style places
    this one a level deeper.  Subclasses override `apply(s)`; the base
    version returns `s` as-is.
    """

    def __init__(self, parent: FormatStyle = None):
        self.parent = parent

    # -- Public Methods ------------------------------------------------

    def apply(self, s: str) -> str:
        return s

    @property
    def level(self) -> int:
        """Nesting depth, counting from 1 at the top style."""
        depth, style = 1, self.parent
        while style is not None:
            depth, style = depth + 1, style.parent
        return depth


# ----------------------------------------------------------------------

class PrintStyles:
    """
    Registry of named `FormatStyle` objects used to print progress
    lines.

    Parameters
    ----------
    display_level : int, default = 10
        Deepest style level that is printed.  ``display_level=0``
        prints nothing.

    Examples
    --------
    >>> fmt = PrintStyles(display_level=1)
    >>> fmt.add('heading', LevelTabStyle())
    >>> fmt.add('step', LevelDotStyle(), parent='heading')
    >>> fmt.print('heading', "BrentSolver:")
    BrentSolver:
    >>> fmt.print('step', "Evaluation 1:")
    >>> fmt.print('step', "Evaluation 1:", display_level=0)
    """

    def __init__(self, display_level: int = 10):
        self.display_level = display_level
        self._styles: dict[str, FormatStyle] = {}

    # -- Public Methods ------------------------------------------------

    def add(self, name: str, style: FormatStyle, parent: str = None):
        """
        Register `style` as `name`, optionally beneath the existing
        style `parent`.

        Raises
        ------
        ValueError
            If `name` is already registered or `parent` is unknown.
        """
        if name in self._styles:
            raise ValueError(f"Print style '{name}' already defined.")

        if parent is not None and parent not in self._styles:
            raise ValueError(f"Parent print style '{parent}' not found.")

        style.parent = self._styles[parent] if parent is not None else None
        self._styles[name] = style

    def print(self, name: str, s: str = '', *args,
              display_level: int = None, **kwargs):
        """
        Print `s` formatted by style `name` if that style is shown at
        `display_level` (defaults to the current setting).  Any other
        arguments go to the builtin `print`.  An unknown style prints
        `s` unformatted and issues a warning.
        """
        style = self._styles.get(name)
        if style is None:
            warnings.warn(f"Format style '{name}' not found.")
            print(s, *args, **kwargs)
            return

        shown = self.display_level if display_level is None else display_level
        if style.level <= shown:
            print(style.apply(s), *args, **kwargs)


# ----------------------------------------------------------------------

class PrintStylesMixin:
    """
    Gives a class its own `PrintStyles` registry as `pstyles`, with the
    `display_level` exposed as a read/write property.  List this mixin
    before other bases so that `display_level` is consumed here.
    """

    def __init__(self, *args, display_level: int = 10, **kwargs):
        super().__init__(*args, **kwargs)
        self.__pstyles = PrintStyles(display_level=display_level)

    # -- Public Methods ------------------------------------------------

    @property
    def display_level(self) -> int:
        return self.__pstyles.display_level

    @display_level.setter
    def display_level(self, level: int):
        self.__pstyles.display_level = level

    @property
    def pstyles(self) -> PrintStyles:
        return self.__pstyles


# ======================================================================

class LevelDotStyle(FormatStyle):
    """
    Prefix with ``... `` at level 2 and a further ``....`` for every
    level below that.  Top level lines are unchanged.

    Examples
    --------
    >>> LevelDotStyle(parent=LevelTabStyle()).apply("Evaluation 1:")
    '... Evaluation 1:'
    """

    def apply(self, s: str) -> str:
        depth = self.level
        if depth == 1:
            return s
        return '....' * (depth - 2) + '... ' + s


class LevelTabStyle(FormatStyle):
    """Indent by four spaces per level below the top."""

    def apply(self, s: str) -> str:
        return ' ' * 4 * (self.level - 1) + s


# ======================================================================

def val2str(x: float, *, sig: int = 6) -> str:
    """
    Fixed width signed scientific string conversion for iteration
    output.

    Examples
    --------
    >>> val2str(-1.0)
    '-1.000000E+00'
    >>> val2str(complex(1.0, -2.0), sig=3)
    '(+1.000E+00-2.000E+00j)'
    """
    if isinstance(x, complex):
        return f"({x.real:+.{sig}E}{x.imag:+.{sig}E}j)"
    return f"{x:+.{sig}E}"
