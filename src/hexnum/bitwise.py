# src/hexnum/bitwise.py
from __future__ import annotations

from collections.abc import Iterator

from hexnum.bignum import WORD_BITS, WORD_MASK, BigNum


def _word_pairs(a: BigNum, b: BigNum) -> Iterator[tuple[int, int]]:
    """Pair up words of both operands, zero-extending the shorter one."""
    size = max(len(a), len(b))
    return ((a.word(i), b.word(i)) for i in range(size))


def xor_(a: BigNum, b: BigNum) -> BigNum:
    return BigNum(x ^ y for x, y in _word_pairs(a, b))


def or_(a: BigNum, b: BigNum) -> BigNum:
    return BigNum(x | y for x, y in _word_pairs(a, b))


def and_(a: BigNum, b: BigNum) -> BigNum:
    # Past the shorter operand the implicit zero word makes the result zero.
    return BigNum(x & y for x, y in _word_pairs(a, b))


def all_ones(bits: int) -> BigNum:
    """The value 2**bits - 1."""
    if bits < 0:
        raise ValueError(f"bit width must be >= 0, got {bits}")
    full, rest = divmod(bits, WORD_BITS)
    words = [WORD_MASK] * full
    if rest:
        words.append((1 << rest) - 1)
    return BigNum(words)


def invert(a: BigNum, bits: int | None = None) -> BigNum:
    """
    One's complement of `a` within a fixed bit width.

    bits=None uses the operand's current word width (32 * len(a)). Bits of
    `a` above the width are discarded, so the result is always < 2**bits.
    invert(invert(a, w), w) == a for every a < 2**w.
    """
    if bits is None:
        bits = WORD_BITS * len(a)
    if bits < 1:
        raise ValueError(f"bit width must be >= 1, got {bits}")
    return xor_(and_(a, all_ones(bits)), all_ones(bits))
