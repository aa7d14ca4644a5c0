import pytest

from pyzeros.util.print_styles import (LevelDotStyle, LevelTabStyle,
                                       PrintStyles, PrintStylesMixin,
                                       val2str)


# ======================================================================

def test_levels():
    fmt = PrintStyles()
    fmt.add('top', LevelTabStyle())
    fmt.add('mid', LevelTabStyle(), parent='top')
    fmt.add('low', LevelDotStyle(), parent='mid')

    with pytest.raises(ValueError):
        fmt.add('top', LevelTabStyle())
    with pytest.raises(ValueError):
        fmt.add('other', LevelTabStyle(), parent='missing')

    low = LevelDotStyle(parent=LevelTabStyle(parent=LevelTabStyle()))
    assert low.level == 3
    assert low.apply("x") == "....... x"
    assert LevelTabStyle(parent=LevelTabStyle()).apply("x") == "    x"


def test_print(capsys):
    fmt = PrintStyles(display_level=2)
    fmt.add('top', LevelTabStyle())
    fmt.add('mid', LevelDotStyle(), parent='top')
    fmt.add('low', LevelDotStyle(), parent='mid')

    fmt.print('top', "A")
    fmt.print('mid', "B")
    fmt.print('low', "C")
    fmt.print('low', "D", display_level=3)
    assert capsys.readouterr().out == "A\n... B\n....... D\n"

    with pytest.warns(UserWarning):
        fmt.print('missing', "E")
    assert capsys.readouterr().out == "E\n"


# ----------------------------------------------------------------------

class _Printer(PrintStylesMixin):
    pass


def test_mixin():
    obj = _Printer(display_level=1)
    assert obj.display_level == 1
    obj.display_level = 0
    assert obj.pstyles.display_level == 0


def test_val2str():
    assert val2str(1234.5) == '+1.234500E+03'
    assert val2str(-0.5, sig=2) == '-5.00E-01'
    assert val2str(2j) == '(+0.000000E+00+2.000000E+00j)'
