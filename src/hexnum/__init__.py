from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("hexnum")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .arith import add, shift_left, shift_right, sub
from .bignum import BigNum, compare, compare_greater_or_equal, parse_hex, to_hex
from .bitwise import all_ones, and_, invert, or_, xor_
from .config import has_profile, load_settings, read_current_profile
from .division import divmod_, mod, mod_long_division, mod_repeated_subtraction
from .errors import BigNumError, DivisionByZero, MalformedInput, SubtractionUnderflow, UserInputError
from .expreval import evaluate
from .runtime import APPLY, CFG
from .workspace import workspace_dir

__all__ = [
    "APPLY",
    "CFG",
    "BigNum",
    "BigNumError",
    "DivisionByZero",
    "MalformedInput",
    "SubtractionUnderflow",
    "UserInputError",
    "__version__",
    "add",
    "all_ones",
    "and_",
    "compare",
    "compare_greater_or_equal",
    "divmod_",
    "evaluate",
    "has_profile",
    "invert",
    "load_settings",
    "mod",
    "mod_long_division",
    "mod_repeated_subtraction",
    "or_",
    "parse_hex",
    "read_current_profile",
    "shift_left",
    "shift_right",
    "sub",
    "to_hex",
    "workspace_dir",
    "xor_",
]
