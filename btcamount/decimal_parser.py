#!/usr/bin/env python3

# Copyright (C) 2017-2022 The btcamount developers
#
# This file is part of btcamount. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcamount including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exact parsing of decimal amount strings.

A decimal amount string is ASCII text with the following grammar:

    ['+'] digit+ ['.' digit+]

i.e. an optional plus sign, a mandatory run of integral digits
and an optional point followed by a mandatory run of fractional digits.
There is no exponent notation, no digit grouping (neither "1,000"
nor "1_000") and no whitespace tolerance;
".5" and "5." are not valid amounts either.
A leading minus sign is recognized only to be rejected
with a dedicated NegativeAmountError.

Parsing only locates the digit runs, so it is linear in the input length.
The integral run is kept without its leading zeros,
the fractional run without its trailing zeros (and their count):
"0.10000000" and "0.1" differ only in the number of trailing zeros.
This way the caller can bound the number of significant digits
before converting them to int by plain base-10 accumulation:
no float is ever involved, so no precision can be lost.
"""

from typing import NamedTuple, Optional

from btcamount.alias import String
from btcamount.exceptions import (
    BTCAmountTypeError,
    InvalidAmountError,
    NegativeAmountError,
)

_DIGITS = b"0123456789"


def _int_from_digits(digits: bytes) -> int:
    "Return the int value of a (short) run of ASCII digits."

    value = 0
    for digit in digits:
        value *= 10
        value += digit - _DIGITS[0]
    return value


class FractionalPart(NamedTuple):
    # the digit run without its trailing zeros
    significant: bytes
    trailing_zeros: int = 0

    @property
    def length(self) -> int:
        return len(self.significant) + self.trailing_zeros

    @property
    def significant_digits(self) -> int:
        return len(self.significant)

    @property
    def digits(self) -> int:
        "Return the int value of the whole fractional digit run."
        return _int_from_digits(self.significant) * 10**self.trailing_zeros

    def scaled(self, decimals: int) -> int:
        """Return the fractional part as an int number of 10^-decimals units.

        Trailing zeros are irrelevant: "0.5", "0.50", and "0.500000000000"
        are all the same.
        Any other digit beyond the given decimals would require rounding,
        hence it is an error.
        The check comes before any int conversion,
        so that the work is bounded by decimals.
        """

        significant_digits = self.significant_digits
        if significant_digits > decimals:
            err_msg = f"too many decimals: {significant_digits}"
            err_msg += f" instead of {decimals} at most"
            raise InvalidAmountError(err_msg)
        significant = _int_from_digits(self.significant)
        return significant * 10 ** (decimals - significant_digits)


class ParsedDecimal(NamedTuple):
    # the digit run without its leading zeros
    integral_digits: bytes
    fractional: Optional[FractionalPart] = None

    @property
    def integral_length(self) -> int:
        "Return the number of significant integral digits."
        return len(self.integral_digits)

    @property
    def integral(self) -> int:
        "Return the int value of the integral part."
        return _int_from_digits(self.integral_digits)


def _digit_run_end(data: bytes, start: int) -> int:
    "Return the end index of the digit run starting at start."

    # bytes.lstrip is linear in the run length
    return len(data) - len(data[start:].lstrip(_DIGITS))


def parse_decimal(data: String) -> ParsedDecimal:
    """Return the integral and fractional parts of a decimal amount string.

    Only the digit run boundaries are scanned here:
    digits are converted to int on demand,
    once the caller has bounded their number.
    """

    text = data
    if isinstance(data, str):
        try:
            data = data.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidAmountError(f"non-ascii amount: {text!r}") from e
    elif isinstance(data, (bytearray, memoryview)):
        data = bytes(data)
    if not isinstance(data, bytes):
        raise BTCAmountTypeError(f"not a string: {text!r}")

    if data[:1] == b"-":
        raise NegativeAmountError(f"negative amount: {text!r}")
    start = 1 if data[:1] == b"+" else 0

    end = _digit_run_end(data, start)
    if end == start:
        raise InvalidAmountError(f"missing integral digits: {text!r}")
    integral_digits = data[start:end].lstrip(b"0")

    fractional = None
    if data[end : end + 1] == b".":
        start = end + 1
        end = _digit_run_end(data, start)
        if end == start:
            raise InvalidAmountError(f"missing fractional digits: {text!r}")
        run = data[start:end]
        significant = run.rstrip(b"0")
        fractional = FractionalPart(significant, len(run) - len(significant))

    if end != len(data):
        raise InvalidAmountError(f"invalid trailing characters: {text!r}")

    return ParsedDecimal(integral_digits, fractional)
