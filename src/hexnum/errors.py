# src/hexnum/errors.py
from __future__ import annotations


class BigNumError(Exception):
    """Base class for arithmetic and parsing failures on BigNum values."""


class MalformedInput(BigNumError, ValueError):
    """Text that is not a hexadecimal literal (or not a valid expression)."""


class DivisionByZero(BigNumError, ZeroDivisionError):
    pass


class SubtractionUnderflow(BigNumError, ArithmeticError):
    """Raised by sub() when the minuend is smaller than the subtrahend."""


class UserInputError(Exception):
    pass
