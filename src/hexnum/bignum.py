# src/hexnum/bignum.py
"""
BigNum - arbitrary-precision unsigned integers on 32-bit words.

A BigNum stores its value as a tuple of unsigned 32-bit words, least
significant word first:

    value = sum(words[i] * 2**(32*i))

The tuple is always normalized: it is never empty and never ends in a zero
word, except for the value zero itself, which is exactly ``(0,)``.
Instances are immutable; every operation builds a new value.

Text conversion is hexadecimal only (see parse_hex / to_hex).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from hexnum.errors import MalformedInput

WORD_BITS = 32
WORD_BASE = 1 << WORD_BITS
WORD_MASK = WORD_BASE - 1
WORD_HEX_DIGITS = WORD_BITS // 4

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def normalize(words: Iterable[int]) -> tuple[int, ...]:
    """Drop most-significant zero words, keeping at least one word."""
    out = list(words)
    while len(out) > 1 and out[-1] == 0:
        out.pop()
    return tuple(out) if out else (0,)


@dataclass(frozen=True, repr=False)
class BigNum:
    words: tuple[int, ...] = (0,)

    def __post_init__(self) -> None:
        words = tuple(self.words)
        for w in words:
            if not isinstance(w, int) or isinstance(w, bool):
                raise TypeError(f"word must be an int, got {type(w).__name__}")
            if w < 0 or w > WORD_MASK:
                raise ValueError(f"word out of range for {WORD_BITS}-bit storage: {w:#x}")
        # frozen dataclass: bypass __setattr__ once, at construction
        object.__setattr__(self, "words", normalize(words))

    # --- constructors ---------------------------------------------------------

    @classmethod
    def zero(cls) -> BigNum:
        return cls((0,))

    @classmethod
    def from_words(cls, words: Iterable[int]) -> BigNum:
        return cls(tuple(words))

    @classmethod
    def from_int(cls, n: int) -> BigNum:
        """Split a non-negative Python int into words."""
        if n < 0:
            raise ValueError("BigNum is unsigned; got a negative int")
        words = []
        while n:
            words.append(n & WORD_MASK)
            n >>= WORD_BITS
        return cls(words)

    @classmethod
    def from_hex(cls, text: str) -> BigNum:
        return parse_hex(text)

    # --- inspection -----------------------------------------------------------

    def word(self, i: int) -> int:
        """Word i of the zero-extended value (0 beyond the stored length)."""
        return self.words[i] if 0 <= i < len(self.words) else 0

    def is_zero(self) -> bool:
        return self.words == (0,)

    def bit_length(self) -> int:
        return (len(self.words) - 1) * WORD_BITS + self.words[-1].bit_length()

    def to_int(self) -> int:
        value = 0
        for w in reversed(self.words):
            value = (value << WORD_BITS) | w
        return value

    def __len__(self) -> int:
        return len(self.words)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return to_hex(self)

    def __repr__(self) -> str:
        return f"BigNum({to_hex(self)})"

    # --- ordering -------------------------------------------------------------

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return compare_greater_or_equal(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return compare(self, other) > 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return compare(self, other) <= 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return not compare_greater_or_equal(self, other)

    # --- operators (delegate to the operation modules) -----------------------

    def __xor__(self, other: object) -> BigNum:
        from hexnum.bitwise import xor_
        return xor_(self, other) if isinstance(other, BigNum) else NotImplemented

    def __or__(self, other: object) -> BigNum:
        from hexnum.bitwise import or_
        return or_(self, other) if isinstance(other, BigNum) else NotImplemented

    def __and__(self, other: object) -> BigNum:
        from hexnum.bitwise import and_
        return and_(self, other) if isinstance(other, BigNum) else NotImplemented

    def __invert__(self) -> BigNum:
        from hexnum.bitwise import invert
        return invert(self)

    def __lshift__(self, n: int) -> BigNum:
        from hexnum.arith import shift_left
        return shift_left(self, n) if isinstance(n, int) else NotImplemented

    def __rshift__(self, n: int) -> BigNum:
        from hexnum.arith import shift_right
        return shift_right(self, n) if isinstance(n, int) else NotImplemented

    def __add__(self, other: object) -> BigNum:
        from hexnum.arith import add
        return add(self, other) if isinstance(other, BigNum) else NotImplemented

    def __sub__(self, other: object) -> BigNum:
        from hexnum.arith import sub
        return sub(self, other) if isinstance(other, BigNum) else NotImplemented

    def __mod__(self, other: object) -> BigNum:
        from hexnum.division import mod
        return mod(self, other) if isinstance(other, BigNum) else NotImplemented

    def __divmod__(self, other: object) -> tuple[BigNum, BigNum]:
        from hexnum.division import divmod_
        return divmod_(self, other) if isinstance(other, BigNum) else NotImplemented


# --- text conversion ----------------------------------------------------------


def parse_hex(text: str) -> BigNum:
    """
    Parse a hexadecimal literal, most significant digit first.

    Surrounding whitespace and an optional 0x/0X prefix are accepted.
    Digits are grouped into 8-digit words from the right. Anything else
    (inner spaces, underscores, signs, an empty literal) raises MalformedInput.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    s = text.strip()
    if s[:2] in ("0x", "0X"):
        s = s[2:]
    if not s:
        raise MalformedInput(f"empty hexadecimal literal: {text!r}")
    for pos, ch in enumerate(s):
        if ch not in _HEX_DIGITS:
            raise MalformedInput(f"invalid hexadecimal digit {ch!r} at position {pos} in {text!r}")

    words = []
    for end in range(len(s), 0, -WORD_HEX_DIGITS):
        start = max(end - WORD_HEX_DIGITS, 0)
        words.append(int(s[start:end], 16))
    return BigNum(words)


def to_hex(x: BigNum, *, pad: bool = False) -> str:
    """
    Render as '0x' + uppercase hex, most significant word first.

    Lower words are always zero-padded to 8 digits so the output parses back
    to the same value. The top word is unpadded unless pad=True.
    """
    top, *rest = reversed(x.words)
    head = f"{top:0{WORD_HEX_DIGITS}X}" if pad else f"{top:X}"
    return "0x" + head + "".join(f"{w:0{WORD_HEX_DIGITS}X}" for w in rest)


# --- comparison ---------------------------------------------------------------


def compare(a: BigNum, b: BigNum) -> int:
    """Return -1, 0 or 1. Both operands are normalized, so length decides first."""
    if len(a.words) != len(b.words):
        return 1 if len(a.words) > len(b.words) else -1
    for x, y in zip(reversed(a.words), reversed(b.words)):
        if x != y:
            return 1 if x > y else -1
    return 0


def compare_greater_or_equal(a: BigNum, b: BigNum) -> bool:
    return compare(a, b) >= 0
