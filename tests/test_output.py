import io

import pytest

from cubgrid.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("x", out)
    put_char("y", out)
    assert out.getvalue() == "x" + "y"


def test_put_char_rejects_strings():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("cub3D map", out)
    assert out.getvalue() == "cub3D map"


def test_put_str_empty():
    out = io.StringIO()
    put_str("", out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("Error", out)
    assert out.getvalue() == "Error\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n
    assert out.getvalue().startswith("-") == (n < 0)


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_rejects_float():
    with pytest.raises(TypeError):
        put_nbr(1.5, io.StringIO())


def test_default_is_stdout(capsys):
    put_str("abc")
    put_endl("def")
    put_nbr(-5)
    put_char("!")
    assert capsys.readouterr().out == "abc" + "def\n" + "-5" + "!"