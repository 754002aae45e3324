# src/hexnum/expreval.py
"""
Safe evaluation of hexadecimal BigNum expressions.

Every literal is hexadecimal, with or without a 0x prefix, shift counts
included ("abcd << 10" shifts by 16 bits). Allowed syntax:

    a ^ b   a | b   a & b   ~a   a << n   a >> n
    a + b   a - b   a % b   ( ... )
    a < b   a <= b  a == b  a != b  a > b  a >= b   (one comparison, -> bool)

Names, calls, attributes, unary minus and everything else are rejected
with MalformedInput. BEHAVIOUR.MAX_WORDS caps the size of literals and of
every intermediate result.
"""

from __future__ import annotations

import ast
import re

from hexnum.arith import add, shift_left, shift_right, sub
from hexnum.bignum import WORD_BITS, BigNum, compare, parse_hex
from hexnum.bitwise import and_, invert, or_, xor_
from hexnum.division import mod
from hexnum.errors import MalformedInput, UserInputError
from hexnum.runtime import CFG

# Whole hex words only; "0xZZ" or "12g" stay untouched and fail in ast.parse.
_HEX_TOKEN_RE = re.compile(r"(?<![\w.])(?:0[xX])?[0-9A-Fa-f]+(?![\w.])")
_NAME_PREFIX = "_h"

_BINOPS = {
    ast.BitXor: xor_,
    ast.BitOr:  or_,
    ast.BitAnd: and_,
    ast.Add:    add,
    ast.Sub:    sub,
    ast.Mod:    mod,
}
_SHIFTS = {
    ast.LShift: shift_left,
    ast.RShift: shift_right,
}
_COMPARES = {
    ast.Lt:    lambda c: c < 0,
    ast.LtE:   lambda c: c <= 0,
    ast.Eq:    lambda c: c == 0,
    ast.NotEq: lambda c: c != 0,
    ast.Gt:    lambda c: c > 0,
    ast.GtE:   lambda c: c >= 0,
}

_MAX_NODES = 256  # sanity guard


def _max_words() -> int:
    return int(CFG("BEHAVIOUR.MAX_WORDS", 4096))


def _too_large(limit: int) -> UserInputError:
    return UserInputError(
        f"value has more than {limit} words. "
        "Increase BEHAVIOUR.MAX_WORDS in the profile or pass a smaller value."
    )


def _check_size(value: BigNum, limit: int) -> BigNum:
    if len(value) > limit:
        raise _too_large(limit)
    return value


def _substitute_literals(expr: str) -> tuple[str, dict[str, BigNum]]:
    """Replace each hex literal by a placeholder name; return (source, table)."""
    table: dict[str, BigNum] = {}
    limit = _max_words()

    def _sub(m: re.Match[str]) -> str:
        name = f"{_NAME_PREFIX}{len(table)}"
        table[name] = _check_size(parse_hex(m.group(0)), limit)
        return name

    return _HEX_TOKEN_RE.sub(_sub, expr), table


def evaluate(expr: str) -> BigNum | bool:
    """Evaluate a hex expression; comparisons return bool, everything else BigNum."""
    if not expr or not expr.strip():
        raise MalformedInput("empty expression")
    if "_" in expr:
        # never valid here, and keeps user text from reaching the placeholder names
        raise MalformedInput("underscores are not allowed in hex expressions")

    source, table = _substitute_literals(expr.strip())
    try:
        tree = ast.parse(source, mode="eval")
    except SyntaxError as e:
        raise MalformedInput(f"invalid hex expression: {expr!r}") from e

    if sum(1 for _ in ast.walk(tree)) > _MAX_NODES:
        raise MalformedInput("expression too large")

    limit = _max_words()

    def _value(node: ast.AST) -> BigNum:
        v = _eval(node)
        if not isinstance(v, BigNum):
            raise MalformedInput("a comparison cannot be used as an operand")
        return v

    def _eval(node: ast.AST) -> BigNum | bool:
        if isinstance(node, ast.Name):
            if node.id in table:
                return table[node.id]
            raise MalformedInput(f"names are not allowed: {node.id!r}")

        if isinstance(node, ast.UnaryOp):
            if isinstance(node.op, ast.Invert):
                return invert(_value(node.operand))
            if isinstance(node.op, ast.USub):
                raise MalformedInput("negation is not defined for unsigned values")
            if isinstance(node.op, ast.UAdd):
                return _value(node.operand)

        if isinstance(node, ast.BinOp):
            op_type = type(node.op)
            if op_type in _SHIFTS:
                count = _value(node.right)
                if len(count) > 1:
                    raise UserInputError("shift count does not fit in one word")
                left = _value(node.left)
                n = count.to_int()
                # size the left shift before building it
                if op_type is ast.LShift and left and -(-(left.bit_length() + n) // WORD_BITS) > limit:
                    raise _too_large(limit)
                return _check_size(_SHIFTS[op_type](left, n), limit)
            if op_type in _BINOPS:
                left = _value(node.left)
                right = _value(node.right)
                return _check_size(_BINOPS[op_type](left, right), limit)
            raise MalformedInput(f"unsupported operator: {op_type.__name__}")

        if isinstance(node, ast.Compare):
            if len(node.ops) != 1:
                raise MalformedInput("chained comparisons are not supported")
            test = _COMPARES.get(type(node.ops[0]))
            if test is None:
                raise MalformedInput(f"unsupported comparison: {type(node.ops[0]).__name__}")
            return test(compare(_value(node.left), _value(node.comparators[0])))

        if isinstance(node, ast.Constant):
            # Leftovers the literal pass did not claim, e.g. 1.5 or "x"
            raise MalformedInput(f"not a hex literal: {node.value!r}")

        if isinstance(node, ast.Call):
            raise MalformedInput("function calls are not allowed")

        raise MalformedInput(f"unsupported syntax: {type(node).__name__}")

    return _eval(tree.body)
