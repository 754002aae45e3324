# tests/test_bignum.py
"""
Unit tests for the BigNum value type and its operations.

Run: pytest -v
"""

from __future__ import annotations

import pytest

from hexnum import (
    BigNum,
    DivisionByZero,
    MalformedInput,
    SubtractionUnderflow,
    add,
    all_ones,
    and_,
    compare,
    compare_greater_or_equal,
    divmod_,
    invert,
    mod,
    mod_long_division,
    mod_repeated_subtraction,
    or_,
    parse_hex,
    shift_left,
    shift_right,
    sub,
    to_hex,
    xor_,
)

# Sample operands (256-bit) used throughout
A = "51bf608414ad5726a3c1bec098f77b1b54ffb2787f8d528a74c1d7fde6470ea4"
B = "403db8ad88a3932a0b7e8189aed9eeffb8121dfac05c3512fdb396dd73f6331c"
C = "36f028580bb02cc8272a9a020f4200e346e276ae664e45ee80745574e2f5ab80"
D = "70983d692f648185febe6d6fa607630ae68649f7e6fc45b94680096c06e4fadb"
E = "33ced2c76b26cae94e162c4c0d2c0ff7c13094b0185a3c122e732d5ba77efebc"
F = "22e962951cb6cd2ce279ab0e2095825c141d48ef3ca9dabf253e38760b57fe03"


def h(text: str) -> BigNum:
    return parse_hex(text)


# ---------- construction / normalization --------------------------------------


def test_zero_is_single_zero_word():
    assert BigNum.zero().words == (0,)
    assert BigNum().words == (0,)
    assert BigNum([]).words == (0,)
    assert BigNum([0, 0, 0]).words == (0,)


def test_trailing_zero_words_are_dropped():
    assert BigNum([5, 0, 0]).words == (5,)
    assert BigNum([0, 7, 0]).words == (0, 7)


def test_words_must_fit_in_32_bits():
    with pytest.raises(ValueError):
        BigNum([0x1_0000_0000])
    with pytest.raises(ValueError):
        BigNum([-1])
    with pytest.raises(TypeError):
        BigNum([1.0])


def test_instances_are_immutable_and_do_not_alias_input():
    src = [1, 2, 3]
    x = BigNum(src)
    src[0] = 99
    assert x.words == (1, 2, 3)
    with pytest.raises(AttributeError):
        x.words = (4,)  # type: ignore[misc]


def test_int_conversion():
    n = (0xDEADBEEF << 64) | 0x12345678
    x = BigNum.from_int(n)
    assert x.words == (0x12345678, 0, 0xDEADBEEF)
    assert x.to_int() == n
    assert int(x) == n
    assert BigNum.from_int(0).words == (0,)
    with pytest.raises(ValueError):
        BigNum.from_int(-1)


def test_bit_length_and_truthiness():
    assert BigNum.zero().bit_length() == 0
    assert not BigNum.zero()
    assert BigNum([1]).bit_length() == 1
    assert BigNum([0, 1]).bit_length() == 33
    assert BigNum([0, 1])


# ---------- parse_hex / to_hex -------------------------------------------------


def test_parse_hex_groups_words_from_the_right():
    assert h("123456789").words == (0x23456789, 0x1)
    assert h("ABCDEF0123456789").words == (0x23456789, 0xABCDEF01)


def test_parse_hex_accepts_prefix_case_and_whitespace():
    assert h("0xabcd") == h("ABCD") == h("  0XaBcD \n")


def test_parse_hex_normalizes_leading_zeros():
    assert h("00000000000000000000000000ff").words == (0xFF,)
    assert h("0").words == (0,)
    assert h("0x0000").words == (0,)


@pytest.mark.parametrize("bad", ["", "0x", "   ", "12g4", "0xabcd ef", "-1", "+1", "1_000", "0x0x1", "ab.cd"])
def test_parse_hex_rejects_malformed_text(bad):
    with pytest.raises(MalformedInput):
        parse_hex(bad)


def test_malformed_input_is_a_value_error():
    with pytest.raises(ValueError):
        parse_hex("xyz")


def test_to_hex_pads_inner_words_only():
    assert to_hex(BigNum([0x1, 0x1])) == "0x100000001"
    assert to_hex(BigNum([0xABC])) == "0xABC"
    assert to_hex(BigNum.zero()) == "0x0"
    assert to_hex(BigNum([0x1, 0x1]), pad=True) == "0x0000000100000001"


def test_to_hex_round_trip_for_unaligned_input():
    x = h("123456789")
    assert to_hex(x) == "0x123456789"
    assert parse_hex(to_hex(x)) == x


def test_str_and_repr_use_hex():
    assert str(h("abcd")) == "0xABCD"
    assert repr(h("abcd")) == "BigNum(0xABCD)"


# ---------- comparison ---------------------------------------------------------


def test_compare_by_length_then_words():
    small, big = h("ffffffff"), h("100000000")
    assert compare(small, big) == -1
    assert compare(big, small) == 1
    assert compare(big, h("0x100000000")) == 0
    assert compare(h("200000001"), h("100000002")) == 1


def test_compare_greater_or_equal():
    assert compare_greater_or_equal(h(A), h(B))
    assert not compare_greater_or_equal(h(B), h(A))
    assert compare_greater_or_equal(h(A), h(A))


def test_rich_comparisons():
    a, b = h(B), h(A)
    assert a < b and a <= b and b > a and b >= a
    assert a != b and a == h(B)
    assert not (a > b)
    assert sorted([h(A), h("1"), h(B), h("0")]) == [h("0"), h("1"), h(B), h(A)]


def test_equal_values_hash_equal():
    assert hash(h("0x00ff")) == hash(BigNum([0xFF, 0]))
    assert len({h("1"), BigNum([1]), BigNum.from_int(1)}) == 1


# ---------- bitwise ------------------------------------------------------------


def test_xor_sample_operands():
    assert xor_(h(A), h(B)).to_int() == int(A, 16) ^ int(B, 16)
    assert h(A) ^ h(B) == xor_(h(A), h(B))


def test_xor_of_equal_values_is_zero():
    assert xor_(h(A), h(A)).words == (0,)


def test_or_and_sample_operands():
    assert or_(h(A), h(B)).to_int() == int(A, 16) | int(B, 16)
    assert and_(h(A), h(B)).to_int() == int(A, 16) & int(B, 16)


def test_and_with_shorter_operand_clears_high_words():
    long = h("ffffffff" "ffffffff" "12345678")
    short = h("0f0f0f0f")
    assert and_(long, short).words == (0x02040608,)
    assert and_(short, long).words == (0x02040608,)


def test_or_xor_with_shorter_operand_keep_high_words():
    long = h("aaaaaaaa" "00000000")
    short = h("5")
    assert or_(long, short).words == (0x5, 0xAAAAAAAA)
    assert xor_(short, long).words == (0x5, 0xAAAAAAAA)


def test_invert_at_operand_width():
    x = h(A)
    assert invert(x).to_int() == int(A, 16) ^ ((1 << 256) - 1)
    assert ~x == invert(x)


def test_invert_of_all_ones_word_is_zero():
    assert invert(h("ffffffff")).words == (0,)


def test_invert_with_explicit_width():
    assert invert(h("abcd"), 16) == h("5432")
    assert invert(h("0"), 4) == h("f")
    assert invert(h("0"), 40) == h("ff" "ffffffff")
    # bits above the width are dropped
    assert invert(h("1ff"), 8) == h("0")


def test_invert_rejects_non_positive_width():
    with pytest.raises(ValueError):
        invert(h("1"), 0)


def test_all_ones():
    assert all_ones(0) == BigNum.zero()
    assert all_ones(4) == h("f")
    assert all_ones(64) == h("ffffffffffffffff")
    assert all_ones(33).words == (0xFFFFFFFF, 0x1)


# ---------- shifts -------------------------------------------------------------


def test_shift_left_small():
    assert shift_left(h("abcd"), 3) == h("55E68")
    assert h("abcd") << 3 == h("55E68")


def test_shift_right_small():
    assert shift_right(h("abcd"), 3) == h("1579")
    assert h("abcd") >> 3 == h("1579")


def test_shift_left_grows_by_a_word_on_carry_out():
    x = h("80000000")
    assert shift_left(x, 1).words == (0, 1)


def test_shift_by_whole_words():
    x = h("12345678")
    assert shift_left(x, 64).words == (0, 0, 0x12345678)
    assert shift_right(shift_left(x, 64), 64) == x
    assert shift_left(x, 100).to_int() == 0x12345678 << 100


def test_shift_right_drops_low_bits_and_can_reach_zero():
    assert shift_right(h("ff"), 8) == BigNum.zero()
    assert shift_right(h(A), 1000) == BigNum.zero()
    assert shift_right(h("1" + "0" * 8), 1).words == (0x80000000,)


def test_shift_by_zero_is_identity():
    assert shift_left(h(A), 0) == h(A)
    assert shift_right(h(A), 0) == h(A)


def test_negative_shift_count_is_rejected():
    with pytest.raises(ValueError):
        shift_left(h("1"), -1)
    with pytest.raises(ValueError):
        shift_right(h("1"), -1)


# ---------- add / sub ----------------------------------------------------------


def test_add_sample_operands():
    total = add(h(C), h(D))
    assert total.to_int() == int(C, 16) + int(D, 16)
    # no carry out of the top word for these operands
    assert len(total) == len(h(C)) == 8


def test_add_grows_by_one_word_on_overflow():
    top = h("ffffffff" * 8)
    total = add(top, h("1"))
    assert len(total) == 9
    assert total.words == (0,) * 8 + (1,)


def test_add_zero_is_identity():
    assert add(h(A), BigNum.zero()) == h(A)
    assert h(A) + BigNum.zero() == h(A)


def test_sub_sample_operands():
    assert sub(h(E), h(F)).to_int() == int(E, 16) - int(F, 16)
    assert h(E) - h(F) == sub(h(E), h(F))


def test_sub_borrows_across_words():
    assert sub(h("100000000"), h("1")) == h("ffffffff")
    assert sub(h("1" + "0" * 24), h("1")) == h("f" * 24)


def test_sub_normalizes_result():
    assert sub(h(A), h(A)).words == (0,)
    assert len(sub(h("100000005"), h("100000000"))) == 1


def test_sub_underflow_raises():
    with pytest.raises(SubtractionUnderflow):
        sub(h("1"), h("2"))
    with pytest.raises(ArithmeticError):
        sub(h(F), h(E))


# ---------- mod / divmod -------------------------------------------------------


def test_mod_single_aligned_subtraction_case():
    dividend = h("123456789ABCDEF0123456789ABCDEF0")
    divisor = h("1000000000000000000000000000000")  # 2**120
    assert mod(dividend, divisor) == h("0x3456789ABCDEF0123456789ABCDEF0")
    # the first step of long division removes the divisor aligned 4 bits up
    assert sub(dividend, shift_left(divisor, 4)) == h("0x23456789ABCDEF0123456789ABCDEF0")


def test_mod_sample_operands():
    assert mod(h(A), h(F)).to_int() == int(A, 16) % int(F, 16)
    assert mod(h(A), h("10001")).to_int() == int(A, 16) % 0x10001
    assert h(A) % h("10001") == mod(h(A), h("10001"))


def test_mod_small_dividend_returns_dividend():
    assert mod(h("5"), h(A)) == h("5")
    assert mod(BigNum.zero(), h("7")) == BigNum.zero()


def test_mod_of_equal_values_is_zero():
    assert mod(h(A), h(A)) == BigNum.zero()


def test_mod_by_one_is_zero():
    assert mod(h(A), h("1")) == BigNum.zero()


def test_mod_by_zero_raises():
    with pytest.raises(DivisionByZero):
        mod(h(A), BigNum.zero())
    with pytest.raises(ZeroDivisionError):
        mod_repeated_subtraction(h("1"), BigNum.zero())
    with pytest.raises(DivisionByZero):
        divmod_(h("1"), h("0"))


def test_algorithms_agree_on_small_quotients():
    a, b = h("123456789"), h("1001")
    assert mod_long_division(a, b) == mod_repeated_subtraction(a, b) == h(format(0x123456789 % 0x1001, "x"))
    assert mod(a, b, "subtract") == mod(a, b, "long")


def test_mod_unknown_algorithm():
    with pytest.raises(ValueError, match="unknown remainder algorithm"):
        mod(h("5"), h("3"), "newton")
    with pytest.raises(ValueError, match="unknown remainder algorithm"):
        mod(h("5"), h("3"), "")


def test_divmod_returns_quotient_and_remainder():
    q, r = divmod_(h(A), h(F))
    n, d = int(A, 16), int(F, 16)
    assert (q.to_int(), r.to_int()) == divmod(n, d)
    assert divmod(h(A), h(F)) == (q, r)


def test_divmod_quotient_spans_words():
    q, r = divmod_(h("1" + "0" * 20), h("3"))
    assert q.to_int() == (1 << 80) // 3
    assert r.to_int() == (1 << 80) % 3


# ---------- operator plumbing --------------------------------------------------


def test_operators_reject_foreign_types():
    with pytest.raises(TypeError):
        h("1") + 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        h("1") << h("1")  # type: ignore[operator]
    assert (h("1") == 1) is False
