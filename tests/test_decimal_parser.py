#!/usr/bin/env python3

# Copyright (C) 2017-2022 The btcamount developers
#
# This file is part of btcamount. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcamount including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcamount.decimal_parser` module."

import time

import pytest

from btcamount.decimal_parser import FractionalPart, ParsedDecimal, parse_decimal
from btcamount.exceptions import (
    BTCAmountTypeError,
    InvalidAmountError,
    NegativeAmountError,
    ParseAmountError,
    ParseAmountErrorKind,
    TooLargeError,
)


def test_integral() -> None:
    assert parse_decimal("5") == ParsedDecimal(b"5")
    assert parse_decimal("+5") == ParsedDecimal(b"5")
    assert parse_decimal(b"5") == ParsedDecimal(b"5")
    assert parse_decimal(b"+5") == ParsedDecimal(b"5")
    assert parse_decimal("0") == ParsedDecimal(b"", None)
    assert parse_decimal("0").integral == 0
    assert parse_decimal("007") == ParsedDecimal(b"7")
    assert parse_decimal("007").integral_length == 1

    # no int size limit: bounds are checked by the Amount type
    digits = "9" * 40
    assert parse_decimal(digits).integral == int(digits)
    assert parse_decimal(digits).integral_length == 40


def test_mutable_binary_input() -> None:
    expected = ParsedDecimal(b"1", FractionalPart(b"5"))
    assert parse_decimal(bytearray(b"1.5")) == expected
    assert parse_decimal(memoryview(b"1.5")) == expected
    assert parse_decimal(memoryview(b"21.50")[1:4]) == expected

    with pytest.raises(NegativeAmountError, match="negative amount: "):
        parse_decimal(bytearray(b"-1"))
    with pytest.raises(InvalidAmountError, match="invalid trailing characters: "):
        parse_decimal(memoryview(b"1.5x"))


def test_fractional() -> None:
    assert parse_decimal("5.0") == ParsedDecimal(b"5", FractionalPart(b"", 1))
    assert parse_decimal("0.000") == ParsedDecimal(b"", FractionalPart(b"", 3))
    assert parse_decimal("+1.2300") == ParsedDecimal(b"1", FractionalPart(b"123", 2))

    parsed = parse_decimal("0.00253583")
    assert parsed == ParsedDecimal(b"", FractionalPart(b"00253583", 0))
    assert parsed.fractional is not None
    assert parsed.fractional.significant_digits == 8
    assert parsed.fractional.length == 8
    assert parsed.fractional.digits == 253583

    parsed = parse_decimal("0.10000000")
    assert parsed == ParsedDecimal(b"", FractionalPart(b"1", 7))
    assert parsed.fractional is not None
    assert parsed.fractional.significant_digits == 1
    assert parsed.fractional.length == 8
    assert parsed.fractional.digits == 10_000_000


def test_long_digit_runs() -> None:

    n = 1_000_000
    start = time.perf_counter()

    parsed = parse_decimal("0" * n + "1." + "5" + "0" * n)
    assert parsed == ParsedDecimal(b"1", FractionalPart(b"5", n))

    # the digits are located, not converted
    parsed = parse_decimal("1" * n)
    assert parsed.integral_length == n
    parsed = parse_decimal("0." + "1" * n)
    assert parsed.fractional is not None
    assert parsed.fractional.significant_digits == n
    with pytest.raises(InvalidAmountError, match="too many decimals: "):
        parsed.fractional.scaled(8)

    assert time.perf_counter() - start < 5


def test_scaled() -> None:
    assert FractionalPart(b"", 1).scaled(8) == 0
    assert FractionalPart(b"5").scaled(8) == 50_000_000
    assert FractionalPart(b"1", 7).scaled(8) == 10_000_000
    assert FractionalPart(b"00253583").scaled(8) == 253583
    assert FractionalPart(b"25").scaled(2) == 25

    # trailing zero padding beyond the available decimals is fine
    fractional = parse_decimal("0.123456780000").fractional
    assert fractional is not None
    assert fractional.scaled(8) == 12_345_678

    fractional = parse_decimal("1.000000000000000000000").fractional
    assert fractional is not None
    assert fractional.scaled(8) == 0

    err_msg = "too many decimals: 9 instead of 8 at most"
    fractional = parse_decimal("0.123456789").fractional
    assert fractional is not None
    with pytest.raises(InvalidAmountError, match=err_msg):
        fractional.scaled(8)

    err_msg = "too many decimals: 1 instead of 0 at most"
    with pytest.raises(InvalidAmountError, match=err_msg):
        FractionalPart(b"5").scaled(0)


def test_negative() -> None:

    for data in ("-1", "-0", "-0.5", "-", "-abc", "--5", b"-1"):
        with pytest.raises(NegativeAmountError, match="negative amount: ") as excinfo:
            parse_decimal(data)
        assert excinfo.value.kind == ParseAmountErrorKind.NEGATIVE_AMOUNT


def test_invalid() -> None:

    err_msg = "missing integral digits: "
    for data in ("", ".5", "+", "+.5", "++5", "+-5", " 5", "\t5", "a5", b""):
        with pytest.raises(InvalidAmountError, match=err_msg) as excinfo:
            parse_decimal(data)
        assert excinfo.value.kind == ParseAmountErrorKind.INVALID_AMOUNT

    err_msg = "missing fractional digits: "
    for data in ("5.", "+5.", "5..0", "5.x", "5. "):
        with pytest.raises(InvalidAmountError, match=err_msg):
            parse_decimal(data)

    err_msg = "invalid trailing characters: "
    for data in ("5.0x", "5 ", "5e3", "1E-8", "1_000", "1,000", "1.2.3", "0x10", "5-"):
        with pytest.raises(InvalidAmountError, match=err_msg):
            parse_decimal(data)

    # non-ascii digits are not digits
    with pytest.raises(InvalidAmountError, match="non-ascii amount: "):
        parse_decimal("\u0665")
    with pytest.raises(InvalidAmountError, match="non-ascii amount: "):
        parse_decimal("1\u00a0000")

    with pytest.raises(BTCAmountTypeError, match="not a string: "):
        parse_decimal(5)  # type: ignore


def test_exception_classes() -> None:

    # parsing errors are plain ValueErrors for the unaware user
    for err in (InvalidAmountError, NegativeAmountError, TooLargeError):
        assert issubclass(err, ParseAmountError)
        assert issubclass(err, ValueError)
    with pytest.raises(ValueError):
        parse_decimal("5.")

    # every parsing error has a kind, unclassified ones are invalid amounts
    assert ParseAmountError("x").kind == ParseAmountErrorKind.INVALID_AMOUNT
    assert TooLargeError("x").kind == ParseAmountErrorKind.TOO_LARGE
    with pytest.raises(ParseAmountError) as excinfo:
        parse_decimal("-1")
    assert excinfo.value.kind == ParseAmountErrorKind.NEGATIVE_AMOUNT
