import sys

from divguard.arith import divide, remainder
from divguard.errors import DivisionByZeroError, OutOfBoundsError

DIVIDE_MARKER = "Caught exception ;)"
REMAINDER_MARKER = "err"
INDEX_MARKER = "Java index exception"

INITIAL_VALUE = 10
SECONDARY_VALUE = 100


def run(out=None, diag=None):
    """Run both guarded operations and return the final value of ``a``.

    Program output goes to ``out`` (stdout by default). The remainder
    handler's marker is a diagnostic and goes to ``diag`` (stderr by default)
    so that stdout carries only the markers and descriptions users rely on.
    """
    out = out if out is not None else sys.stdout
    diag = diag if diag is not None else sys.stderr

    a = INITIAL_VALUE

    # -------- division --------
    try:
        a = divide(a, 0)
        c = SECONDARY_VALUE
        print(c, file=out)
    except DivisionByZeroError as err:
        print(DIVIDE_MARKER, file=out)
        print(err, file=out)

    # -------- remainder --------
    try:
        b = remainder(a, 0)
    except DivisionByZeroError as err:
        print(REMAINDER_MARKER, file=diag)
        print(err, file=out)
    except OutOfBoundsError:
        print(INDEX_MARKER, file=out)

    print(a, file=out)
    return a
