"""Command-line argument checking for the fractal viewer."""

import enum
from dataclasses import dataclass

_NUMERIC_CHARS = frozenset(".\t 0123456789-+")
_LEADING_SPACE = " \t\n\x0b\x0c\r"
_LOWER, _UPPER = -2.0, 2.0

BASIC_USAGE = "<Mandelbrot> or <Julia> <a> <b>"
BASIC_BAD_COMMAND = "Mandelbrot or Julia <a> <b>"
BASIC_JULIA_USAGE = "Julia <a> <b>"
JULIA_OUT_OF_RANGE = "<a> or <b> incorect"
EXTENDED_USAGE = "Phoenix <a> <b> <c> <d> or Mandelbrot or Julia <a> <b> between 2 & -2"
EXTENDED_JULIA_USAGE = "Julia <a> <b> between 2 & -2"
PHOENIX_USAGE = "Phoenix args <a> <b> <c> <d> between 2 & -2"
PHOENIX_OUT_OF_RANGE = "invalid <a> <b> <c> <d>"


class FractalKind(enum.Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = "Mandelbrot"
    JULIA = "Julia"
    PHOENIX = "Phoenix"

    @property
    def title(self):
        """Window title for this fractal."""
        return "Phoenix Fractal" if self is FractalKind.PHOENIX else self.value


@dataclass(frozen=True)
class FractalSpec:
    """A fractal chosen on the command line and its constants."""

    kind: FractalKind
    c: complex = 0j
    p: complex = 0j


class UsageError(Exception):
    """Raised when the command line is not acceptable."""

    def __init__(self, message, status=1):
        super().__init__(message)
        self.message = message
        self.status = status


def is_numeric_arg(text):
    """Tell whether ``text`` looks like a number: digits, signs, blanks, one inner dot."""
    if any(ch not in _NUMERIC_CHARS for ch in text):
        return False
    if text.endswith("."):
        return False
    return text.count(".") <= 1


def parse_number(text):
    """Read a decimal number from the start of ``text``.

    A missing integer part counts as -3, so "-" reads as 3 and ".5" as -2.5;
    such values fall outside the accepted range.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]

    int_len = len(rest) - len(rest.lstrip("0123456789"))
    int_digits, rest = rest[:int_len], rest[int_len:]
    result = -3.0 if not int_digits else 0.0
    for digit in int_digits:
        result = result * 10 + int(digit)

    divisor = 1.0
    if rest.startswith("."):
        rest = rest[1:]
        frac_len = len(rest) - len(rest.lstrip("0123456789"))
        for digit in rest[:frac_len]:
            result = result * 10 + int(digit)
            divisor *= 10
    return sign * result / divisor


def _in_range(values):
    return all(_LOWER <= value <= _UPPER for value in values)


def _numbers(texts, usage, out_of_range):
    if not all(is_numeric_arg(text) for text in texts):
        raise UsageError(usage)
    values = [parse_number(text) for text in texts]
    if not _in_range(values):
        raise UsageError(out_of_range)
    return values


def _parse_basic(argv):
    if not argv:
        raise UsageError(BASIC_USAGE, status=0)
    if len(argv) == 1 and argv[0] == FractalKind.MANDELBROT.value:
        return FractalSpec(FractalKind.MANDELBROT)
    if len(argv) == 3 and argv[0] == FractalKind.JULIA.value:
        a, b = _numbers(argv[1:], BASIC_JULIA_USAGE, JULIA_OUT_OF_RANGE)
        return FractalSpec(FractalKind.JULIA, c=complex(a, b))
    raise UsageError(BASIC_BAD_COMMAND)


def _parse_extended(argv):
    if len(argv) == 1 and argv[0] == FractalKind.MANDELBROT.value:
        return FractalSpec(FractalKind.MANDELBROT)
    if len(argv) == 3 and argv[0] == FractalKind.JULIA.value:
        a, b = _numbers(argv[1:], EXTENDED_JULIA_USAGE, JULIA_OUT_OF_RANGE)
        return FractalSpec(FractalKind.JULIA, c=complex(a, b))
    if len(argv) == 5 and argv[0] == FractalKind.PHOENIX.value:
        cr, ci, pr, pi = _numbers(argv[1:], PHOENIX_USAGE, PHOENIX_OUT_OF_RANGE)
        return FractalSpec(FractalKind.PHOENIX, c=complex(cr, ci), p=complex(pr, pi))
    raise UsageError(EXTENDED_USAGE)


def parse_args(argv, extended=False):
    """Turn the arguments after the program name into a :class:`FractalSpec`.

    The extended viewer also accepts the Phoenix fractal. Raises
    :class:`UsageError` when the arguments are not acceptable.
    """
    argv = list(argv)
    return _parse_extended(argv) if extended else _parse_basic(argv)