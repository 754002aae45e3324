# src/hexnum/cli.py

"""
hexnum - arbitrary-precision unsigned hex calculator

Description:
    Evaluates hexadecimal expressions and named operations on BigNum values
    (32-bit words, unbounded length) and prints the result in hex.

Usage:
    hexnum "51bf6084 ^ 403db8ad"          evaluate an expression
    hexnum xor 51bf6084 403db8ad          named operation
    hexnum inv abcd --bits 16             complement within 16 bits
    hexnum mod 1234 10 --algorithm subtract
    hexnum                                interactive prompt
"""

from __future__ import annotations

import argparse
import sys
import traceback
from collections.abc import Callable

from colorama import Fore, Style
from colorama import init as colorama_init

from hexnum import __version__ as _ver
from hexnum import config as CONFIG
from hexnum.arith import add, shift_left, shift_right, sub
from hexnum.bignum import BigNum, compare, compare_greater_or_equal, parse_hex, to_hex
from hexnum.bitwise import and_, invert, or_, xor_
from hexnum.division import MOD_ALGORITHMS, mod
from hexnum.errors import BigNumError, UserInputError
from hexnum.expreval import evaluate
from hexnum.runtime import APPLY, CFG
from hexnum.runtime import current as _rt_current
from hexnum.workspace import ensure_workspace_seeded

_BINARY_OPS: dict[str, Callable[[BigNum, BigNum], object]] = {
    "xor": xor_,
    "or":  or_,
    "and": and_,
    "add": add,
    "sub": sub,
    "cmp": compare,
    "ge":  compare_greater_or_equal,
}
_SHIFT_OPS = {"shl": shift_left, "shr": shift_right}
OPERATIONS = (*_BINARY_OPS, *_SHIFT_OPS, "inv", "mod")

_HELP = f"""\
Enter a hex expression, e.g.  51bf6084 ^ 403db8ad   or   abcd << 3
Operators: ^ | & ~ << >> + - %  and one comparison (< <= == != > >=).
All literals are hex, shift counts too.
Commands: H help, P list profiles, DEBUG [on|off], <profile name> to switch, Q quit.
Named operations from the shell: {", ".join(OPERATIONS)}
"""


def format_result(value: object) -> str:
    """Render an evaluation result using the OUTPUT.* profile settings."""
    if isinstance(value, BigNum):
        s = to_hex(value, pad=bool(CFG("OUTPUT.PAD_WORDS", False)))
        if CFG("OUTPUT.LOWERCASE", False):
            s = "0x" + s[2:].lower()
        return s
    return str(value)


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    print(f"{prefix} {msg}", file=sys.stderr)


def _apply_profile(name: str | None) -> str:
    """Seed the workspace, pick the profile (argument > remembered > default) and apply it."""
    try:
        ensure_workspace_seeded()
    except OSError as e:
        # Read-only home etc.: run on built-in defaults
        print(f"{Fore.YELLOW}Warning:{Style.RESET_ALL} workspace unavailable ({e}); using defaults.",
              file=sys.stderr)
        return "default"
    chosen = name or CONFIG.read_current_profile() or "default"
    APPLY(CONFIG.load_settings(chosen))
    return chosen


def _need(items: list[str], count: int, op: str) -> None:
    if len(items) != count:
        raise UserInputError(f"'{op}' takes {count} operand(s), got {len(items)}")


def run_operation(op: str, items: list[str], *, bits: int | None = None,
                  algorithm: str | None = None) -> object:
    """Run a named operation on hex operands (shift counts are decimal here)."""
    if op in _BINARY_OPS:
        _need(items, 2, op)
        return _BINARY_OPS[op](parse_hex(items[0]), parse_hex(items[1]))
    if op in _SHIFT_OPS:
        _need(items, 2, op)
        try:
            count = int(items[1], 10)
        except ValueError:
            raise UserInputError(f"shift count must be a decimal integer, got {items[1]!r}") from None
        return _SHIFT_OPS[op](parse_hex(items[0]), count)
    if op == "inv":
        _need(items, 1, op)
        return invert(parse_hex(items[0]), bits)
    if op == "mod":
        _need(items, 2, op)
        return mod(parse_hex(items[0]), parse_hex(items[1]), algorithm)
    raise UserInputError(f"unknown operation '{op}'")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexnum",
        description="Arbitrary-precision unsigned hex calculator (32-bit words).",
        epilog=f"Named operations: {', '.join(OPERATIONS)}. "
               "Without arguments an interactive prompt starts.",
    )
    parser.add_argument("items", nargs="*",
                        help="an expression, or an operation name followed by its operands")
    parser.add_argument("--profile", help="profile name from the workspace profiles/ folder")
    parser.add_argument("--bits", type=int, default=None,
                        help="bit width for 'inv' (default: operand word width)")
    parser.add_argument("--algorithm", choices=sorted(MOD_ALGORITHMS), default=None,
                        help="remainder algorithm for 'mod' and '%%'")
    parser.add_argument("--debug", action="store_true", help="show tracebacks on errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    return parser


def _interactive(profile: str) -> int:
    print(f"hexnum {_ver}  (profile: {profile}). Type H for help, Q to quit.")
    current_profile = profile
    while True:
        try:
            user_input = input(f"{Fore.CYAN}hexnum>{Style.RESET_ALL} ").strip()
            low = user_input.lower()
            if low in {"", "q", "quit"}:
                break

            if low in {"h", "help"}:
                print(_HELP)
                continue

            if low in {"p", "list profiles"}:
                for nm, desc in CONFIG.list_profiles_with_descriptions():
                    mark = "*" if nm == current_profile else " "
                    print(f" {mark} {nm:<16} {desc}")
                continue

            if low.startswith("debug"):
                parts = low.split()
                rt = _rt_current()
                if len(parts) == 1 or parts[1] == "status":
                    print(f"Debug is currently {'ON' if rt.debug else 'OFF'}.")
                elif parts[1] in {"on", "off"}:
                    rt.debug = parts[1] == "on"
                    print(f"Debug mode {'enabled' if rt.debug else 'disabled'} for this session.")
                else:
                    print("Usage: DEBUG [on|off|status]")
                continue

            # treat as profile switch
            if CONFIG.has_profile(user_input):
                try:
                    APPLY(CONFIG.load_settings(user_input))
                    CONFIG.write_current_profile(user_input)
                    current_profile = user_input
                    print(f"Applied profile: {current_profile}")
                except UserInputError as e:
                    _print_user_error(f"failed to load profile '{user_input}': {e}")
                continue

            print(format_result(evaluate(user_input)))

        except (EOFError, KeyboardInterrupt):
            print()
            break
        except (BigNumError, UserInputError, ValueError) as e:
            if _rt_current().debug:
                traceback.print_exc()
            else:
                _print_user_error(str(e))
    return 0


def main(argv: list[str] | None = None) -> int:
    colorama_init()
    args = _build_parser().parse_args(argv)

    try:
        profile = _apply_profile(args.profile)
    except UserInputError as e:
        _print_user_error(str(e))
        return 1
    if args.debug:
        _rt_current().debug = True

    if not args.items:
        return _interactive(profile)

    try:
        op = args.items[0].lower()
        if op in OPERATIONS:
            result = run_operation(op, args.items[1:], bits=args.bits, algorithm=args.algorithm)
        else:
            if args.algorithm:
                _rt_current().settings.setdefault("ARITHMETIC", {})["MOD_ALGORITHM"] = args.algorithm
            result = evaluate(" ".join(args.items))
        print(format_result(result))
    except (BigNumError, UserInputError, ValueError) as e:
        if _rt_current().debug:
            traceback.print_exc()
        else:
            _print_user_error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
