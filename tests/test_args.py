import pytest

from fractscope.args import (
    FractalKind,
    FractalSpec,
    UsageError,
    is_numeric_arg,
    parse_args,
    parse_number,
)


@pytest.mark.parametrize("text", ["1", "-0.5", "+1.25", " 0.3", "\t2", ".5", ""])
def test_numeric_args_accepted(text):
    assert is_numeric_arg(text) is True


@pytest.mark.parametrize("text", ["1.", "1.2.3", "abc", "1e3", "0,5", "2\n"])
def test_non_numeric_args_rejected(text):
    assert is_numeric_arg(text) is False


def test_parse_number_with_sign_and_space():
    assert parse_number("  +1.25") == 1.25


def test_parse_number_sign_symmetry():
    for text in ("1.25", "0.7885", "2", "0"):
        assert parse_number("-" + text) == -parse_number(text)


def test_parse_number_stops_at_junk():
    assert parse_number("1.5abc") == parse_number("1.5")
    assert parse_number("1 2") == parse_number("1")


def test_parse_number_missing_integer_part_quirks():
    assert parse_number(".5") == -2.5
    assert parse_number("-") == 3.0


def test_parse_mandelbrot():
    assert parse_args(["Mandelbrot"]) == FractalSpec(FractalKind.MANDELBROT)
    assert parse_args(["Mandelbrot"], extended=True).kind is FractalKind.MANDELBROT


def test_parse_julia_constants():
    spec = parse_args(["Julia", "0.285", "-0.01"])
    assert spec.kind is FractalKind.JULIA
    assert spec.c == complex(parse_number("0.285"), parse_number("-0.01"))


def test_parse_phoenix_constants():
    spec = parse_args(["Phoenix", "0.5667", "0", "-0.5", "0"], extended=True)
    assert spec.kind is FractalKind.PHOENIX
    assert spec.c == complex(parse_number("0.5667"), 0.0)
    assert spec.p == complex(parse_number("-0.5"), 0.0)


def test_basic_no_arguments_is_soft_usage():
    with pytest.raises(UsageError) as info:
        parse_args([])
    assert info.value.status == 0
    assert info.value.message == "<Mandelbrot> or <Julia> <a> <b>"


def test_basic_unknown_command():
    with pytest.raises(UsageError) as info:
        parse_args(["Phoenix", "0", "0", "0", "0"])
    assert info.value.status == 1
    assert info.value.message == "Mandelbrot or Julia <a> <b>"


def test_basic_julia_bad_number():
    with pytest.raises(UsageError, match="^Julia <a> <b>$"):
        parse_args(["Julia", "x", "0"])


def test_julia_out_of_range():
    with pytest.raises(UsageError, match="<a> or <b> incorect"):
        parse_args(["Julia", "3", "0"])
    with pytest.raises(UsageError, match="<a> or <b> incorect"):
        parse_args(["Julia", "0", "-2.5"], extended=True)


def test_julia_range_is_inclusive():
    spec = parse_args(["Julia", "2", "-2"])
    assert spec.c == complex(2.0, -2.0)


def test_extended_julia_bad_number():
    with pytest.raises(UsageError, match="Julia <a> <b> between 2 & -2"):
        parse_args(["Julia", "1.", "0"], extended=True)


def test_extended_phoenix_bad_number():
    with pytest.raises(UsageError, match="Phoenix args <a> <b> <c> <d> between 2 & -2"):
        parse_args(["Phoenix", "0", "0", "a", "0"], extended=True)


def test_extended_phoenix_out_of_range():
    with pytest.raises(UsageError, match="invalid <a> <b> <c> <d>"):
        parse_args(["Phoenix", "0", "0", "0", "9"], extended=True)


def test_extended_empty_and_unknown():
    for argv in ([], ["Julia"], ["mandelbrot"]):
        with pytest.raises(UsageError) as info:
            parse_args(argv, extended=True)
        assert info.value.status == 1
        assert info.value.message.startswith("Phoenix <a> <b> <c> <d> or Mandelbrot")


def test_parsed_kind_titles():
    assert parse_args(["Mandelbrot"]).kind.title == "Mandelbrot"
    assert parse_args(["Julia", "0", "0"]).kind.title == "Julia"
    phoenix = parse_args(["Phoenix", "0", "0", "0", "0"], extended=True)
    assert phoenix.kind.title == "Phoenix Fractal"