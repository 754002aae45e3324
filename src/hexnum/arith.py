# src/hexnum/arith.py
"""
Word-wise addition, subtraction and shifts.

Carries and borrows travel through a plain Python int accumulator; growth is
always an explicit appended word, never a wraparound.
"""

from __future__ import annotations

from hexnum.bignum import WORD_BASE, WORD_BITS, WORD_MASK, BigNum, compare, to_hex
from hexnum.errors import SubtractionUnderflow


def _check_shift(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"shift count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"shift count must be >= 0, got {n}")


def shift_left(a: BigNum, n: int) -> BigNum:
    _check_shift(n)
    if n == 0 or a.is_zero():
        return BigNum(a.words)

    word_shift, bit_shift = divmod(n, WORD_BITS)
    out = [0] * word_shift
    carry = 0
    for w in a.words:
        acc = (w << bit_shift) | carry
        out.append(acc & WORD_MASK)
        carry = acc >> WORD_BITS
    if carry:
        out.append(carry)
    return BigNum(out)


def shift_right(a: BigNum, n: int) -> BigNum:
    _check_shift(n)
    word_shift, bit_shift = divmod(n, WORD_BITS)
    src = a.words[word_shift:]
    if not src:
        return BigNum.zero()

    out = []
    for i, w in enumerate(src):
        hi = src[i + 1] if i + 1 < len(src) else 0
        out.append(((w >> bit_shift) | (hi << (WORD_BITS - bit_shift))) & WORD_MASK)
    return BigNum(out)


def add(a: BigNum, b: BigNum) -> BigNum:
    out = []
    carry = 0
    for i in range(max(len(a), len(b))):
        acc = a.word(i) + b.word(i) + carry
        out.append(acc & WORD_MASK)
        carry = acc >> WORD_BITS
    if carry:
        out.append(carry)
    return BigNum(out)


def sub(a: BigNum, b: BigNum) -> BigNum:
    """a - b for a >= b. A negative difference raises SubtractionUnderflow."""
    if compare(a, b) < 0:
        raise SubtractionUnderflow(
            f"cannot subtract {to_hex(b)} from smaller value {to_hex(a)}"
        )

    out = []
    borrow = 0
    for i in range(max(len(a), len(b))):
        diff = a.word(i) - b.word(i) - borrow
        if diff < 0:
            diff += WORD_BASE
            borrow = 1
        else:
            borrow = 0
        out.append(diff)
    return BigNum(out)
