# src/hexnum/division.py
"""
Remainder and quotient for BigNum values.

Two remainder algorithms are provided:

  - "long"     shift-subtract long division, O(bitlength^2). Default.
  - "subtract" repeated subtraction of the divisor, O(a/b) subtractions.
               Only usable for small quotients; kept as a reference oracle.

The default can be changed with ARITHMETIC.MOD_ALGORITHM in the profile.
A zero divisor always raises DivisionByZero.
"""

from __future__ import annotations

from collections.abc import Callable

from hexnum.arith import shift_left, shift_right, sub
from hexnum.bignum import WORD_BITS, BigNum, compare
from hexnum.errors import DivisionByZero
from hexnum.runtime import CFG


def _check_divisor(b: BigNum) -> None:
    if b.is_zero():
        raise DivisionByZero("division by zero")


def divmod_(a: BigNum, b: BigNum) -> tuple[BigNum, BigNum]:
    """
    Shift-subtract long division; returns (quotient, remainder).

    The divisor is aligned to the dividend's bit length, then walked down one
    bit at a time. Each step that fits subtracts the aligned divisor and sets
    the matching quotient bit.
    """
    _check_divisor(b)
    if compare(a, b) < 0:
        return BigNum.zero(), BigNum(a.words)

    shift = a.bit_length() - b.bit_length()
    aligned = shift_left(b, shift)
    rem = a
    q_words = [0] * (shift // WORD_BITS + 1)

    while shift >= 0:
        if compare(rem, aligned) >= 0:
            rem = sub(rem, aligned)
            q_words[shift // WORD_BITS] |= 1 << (shift % WORD_BITS)
        aligned = shift_right(aligned, 1)
        shift -= 1

    return BigNum(q_words), rem


def mod_long_division(a: BigNum, b: BigNum) -> BigNum:
    return divmod_(a, b)[1]


def mod_repeated_subtraction(a: BigNum, b: BigNum) -> BigNum:
    _check_divisor(b)
    rem = a
    while compare(rem, b) >= 0:
        rem = sub(rem, b)
    return BigNum(rem.words)


MOD_ALGORITHMS: dict[str, Callable[[BigNum, BigNum], BigNum]] = {
    "long": mod_long_division,
    "subtract": mod_repeated_subtraction,
}


def mod(a: BigNum, b: BigNum, algorithm: str | None = None) -> BigNum:
    """a mod b, with 0 <= result < b. `algorithm` overrides the profile setting."""
    name = CFG("ARITHMETIC.MOD_ALGORITHM", "long") if algorithm is None else algorithm
    try:
        fn = MOD_ALGORITHMS[name]
    except KeyError:
        valid = ", ".join(sorted(MOD_ALGORITHMS))
        raise ValueError(f"unknown remainder algorithm {name!r} (expected one of: {valid})") from None
    return fn(a, b)
