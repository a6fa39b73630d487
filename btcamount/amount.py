#!/usr/bin/env python3

# Copyright (C) 2017-2022 The btcamount developers
#
# This file is part of btcamount. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcamount including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Proper handling of monetary amounts.

A BTC monetary amount is an integer number of satoshis
(1 BTC is 100_000_000 satoshis), at most 21_000_000 BTC
and never negative.

Because of floating-point conversion issues
(e.g. with floats 1.1 + 2.2 != 3.3, and 8.50492428 * 100_000_000
is 850492427.9999999) algebra with bitcoin amounts should never
involve floats: BTC decimal strings are parsed digit by digit
(see btcamount.decimal_parser) into an exact satoshi count.

There are two ways to get an Amount:

* Amount.parse (and Amount.from_btc, Amount.from_json_number)
  for untrusted input: failures are ParseAmountError,
  tagged as negative, invalid, or too large;
* Amount(sats) or Amount.from_sat for trusted satoshi counts:
  a count out of range is a programming error (AmountRangeError).

Arithmetic results go through the trusted constructor:
they never wrap, they fail with AmountRangeError instead.
"""

import json
from dataclasses import InitVar, dataclass, field
from decimal import Decimal, FloatOperation, getcontext
from io import BytesIO
from typing import Any, Optional, Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from btcamount.alias import BinaryData, BTCValue, String
from btcamount.decimal_parser import parse_decimal
from btcamount.exceptions import (
    AmountRangeError,
    BTCAmountTypeError,
    BTCAmountValueError,
    InvalidAmountError,
    NegativeAmountError,
    TooLargeError,
)

getcontext().traps[FloatOperation] = True

SATOSHI_PER_BITCOIN = 100_000_000
BITCOIN_DIGITS = 8
_BITCOIN_PER_SATOSHI = Decimal("0.00000001")

MAX_SATOSHI = 21_000_000 * SATOSHI_PER_BITCOIN
MAX_BITCOIN = Decimal("21_000_000")
# number of integral digits of MAX_BITCOIN
_MAX_BITCOIN_DIGITS = len(str(MAX_SATOSHI // SATOSHI_PER_BITCOIN))

_Amount = TypeVar("_Amount", bound="Amount")


def _decimal_text(number: Union[Decimal, int, float]) -> str:
    """Return the fixed-point decimal text of a number.

    The magnitude is bounded before formatting,
    so that the text is never much longer than the number's own digits
    (e.g. Decimal("1e999999999") is not written out in full).
    """

    # bool is an int, but not an amount
    if isinstance(number, bool) or not isinstance(number, (Decimal, int, float)):
        raise BTCAmountTypeError(f"not a BTC amount: {number!r}")

    if isinstance(number, int):
        # str of a huge int is slow, if allowed at all
        if number < 0:
            raise NegativeAmountError("negative amount: negative int")
        if number > MAX_SATOSHI // SATOSHI_PER_BITCOIN:
            raise TooLargeError(f"too many BTC: {number.bit_length()}-bit int")
        return str(number)

    # using str in the Decimal constructor avoids the
    # FloatOperation exception; for floats, str is the shortest
    # decimal text that round-trips, e.g. 0.1 is "0.1"
    btc = Decimal(str(number))
    if btc.is_finite():
        if btc.is_signed():
            raise NegativeAmountError(f"negative amount: {number!r}")
        if btc.is_zero():
            return "0"
        if btc.adjusted() >= _MAX_BITCOIN_DIGITS:
            raise TooLargeError(f"too many BTC: {number!r}")
        _, digits, exponent = btc.as_tuple()
        trailing_zeros = len(digits) - len(bytes(digits).rstrip(b"\0"))
        if exponent + trailing_zeros < -BITCOIN_DIGITS:
            raise InvalidAmountError(f"too many decimals: {number!r}")
    return format(btc, "f")


def _bytesio_from_binarydata(data: BinaryData) -> BytesIO:

    if isinstance(data, str):  # hex string
        data = bytes.fromhex(data)
    if isinstance(data, bytes):
        data = BytesIO(data)
    return data


@dataclass(frozen=True, order=True)
class Amount(DataClassJsonMixin):
    # 8 bytes, unsigned little endian
    value: int = 0  # denominated in satoshi
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise BTCAmountTypeError(f"non-integer satoshi amount: {self.value!r}")
        if self.value < 0:
            raise AmountRangeError(f"negative satoshi amount: {self.value}")
        if self.value > MAX_SATOSHI:
            raise AmountRangeError(f"too many satoshis: {self.value}")

    @property
    def sats(self) -> int:
        return self.value

    @property
    def btc(self) -> Decimal:
        "Return the normalized BTC Decimal equivalent."
        return btc_from_sats(self.value)

    @classmethod
    def from_sat(cls: Type[_Amount], sats: int) -> _Amount:
        """Return the Amount of a trusted satoshi count.

        An out of range count is a programming error: AmountRangeError.
        Untrusted input must go through Amount.parse instead.
        """
        return cls(sats)

    @classmethod
    def max_value(cls: Type[_Amount]) -> _Amount:
        return cls(MAX_SATOSHI)

    @classmethod
    def min_value(cls: Type[_Amount]) -> _Amount:
        return cls(0)

    @classmethod
    def zero(cls: Type[_Amount]) -> _Amount:
        "Return the additive identity."
        return cls(0)

    @classmethod
    def one(cls: Type[_Amount]) -> _Amount:
        "Return the smallest positive amount, i.e. one satoshi."
        return cls(1)

    @classmethod
    def parse(cls: Type[_Amount], text: String) -> _Amount:
        """Return the Amount of a BTC decimal string, e.g. "0.00253583".

        The accepted format is ['+'] digit+ ['.' digit+],
        with at most eight significant decimals.
        Failures are reported as NegativeAmountError, InvalidAmountError,
        or TooLargeError (all of them ParseAmountError).
        """

        parsed = parse_decimal(text)

        # bound the digits before any int conversion
        if parsed.integral_length > _MAX_BITCOIN_DIGITS:
            raise TooLargeError(f"too many BTC: {text!r}")
        sats = parsed.integral * SATOSHI_PER_BITCOIN
        if sats > MAX_SATOSHI:
            raise TooLargeError(f"too many BTC: {text!r}")

        if parsed.fractional is not None:
            sats += parsed.fractional.scaled(BITCOIN_DIGITS)
            if sats > MAX_SATOSHI:
                raise TooLargeError(f"too many BTC: {text!r}")

        return cls(sats)

    from_str = parse

    @classmethod
    def from_btc(cls: Type[_Amount], btc: BTCValue) -> _Amount:
        """Return the Amount of a BTC value.

        Strings are parsed as they are;
        numbers (int, Decimal, float) are rendered as fixed-point
        decimal text first, then parsed in the very same way.
        """

        if isinstance(btc, (str, bytes, bytearray, memoryview)):
            return cls.parse(btc)
        return cls.parse(_decimal_text(btc))

    @classmethod
    def from_json_number(
        cls: Type[_Amount], number: Union[String, Decimal, int, float]
    ) -> _Amount:
        """Return the Amount of a JSON number denominated in BTC.

        The number can be provided as JSON text (e.g. b"0.00253583")
        or as an already decoded value.
        """

        if isinstance(number, (bytearray, memoryview)):
            number = bytes(number)
        if isinstance(number, (str, bytes)):
            text = number
            try:
                number = json.loads(text, parse_float=Decimal)
            except ValueError as e:
                raise InvalidAmountError(f"invalid JSON number: {text!r}") from e
            # NaN and Infinity are decoded as float
            if isinstance(number, bool) or not isinstance(number, (Decimal, int)):
                raise InvalidAmountError(f"not a JSON number: {text!r}")
        return cls.from_btc(number)

    def to_btc_str(self) -> str:
        "Return the canonical BTC decimal string, e.g. '0.0025'."

        btc, sats = divmod(self.value, SATOSHI_PER_BITCOIN)
        if sats == 0:
            return str(btc)
        decimals = f"{sats:0{BITCOIN_DIGITS}d}".rstrip("0")
        return f"{btc}.{decimals}"

    def __str__(self) -> str:
        return self.to_btc_str()

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def add(self: _Amount, other: "Amount") -> _Amount:
        "Return the sum, failing if it exceeds the maximum amount."
        if not isinstance(other, Amount):
            raise BTCAmountTypeError(f"not an Amount: {other!r}")
        return type(self)(self.value + other.value)

    def sub(self: _Amount, other: "Amount") -> _Amount:
        "Return the difference, failing if it is negative."
        if not isinstance(other, Amount):
            raise BTCAmountTypeError(f"not an Amount: {other!r}")
        return type(self)(self.value - other.value)

    def checked_add(self: _Amount, other: "Amount") -> Optional[_Amount]:
        "Return the sum, or None if it exceeds the maximum amount."
        if not isinstance(other, Amount):
            raise BTCAmountTypeError(f"not an Amount: {other!r}")
        value = self.value + other.value
        return type(self)(value) if value <= MAX_SATOSHI else None

    def checked_sub(self: _Amount, other: "Amount") -> Optional[_Amount]:
        "Return the difference, or None if it is negative."
        if not isinstance(other, Amount):
            raise BTCAmountTypeError(f"not an Amount: {other!r}")
        value = self.value - other.value
        return type(self)(value) if value >= 0 else None

    def __add__(self, other: Any) -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Amount":
        # sum() starts from the int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Any) -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> "Amount":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return type(self)(self.value * other)

    __rmul__ = __mul__

    def __floordiv__(self, other: Any) -> Any:
        # amount // amount is a plain int ratio
        if isinstance(other, Amount):
            return self.value // other.value
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return type(self)(self.value // other)

    def serialize(self, check_validity: bool = True) -> bytes:
        "Return the 8 bytes unsigned little endian serialization."

        if check_validity:
            self.assert_valid()

        return self.value.to_bytes(8, byteorder="little", signed=False)

    @classmethod
    def deserialize(
        cls: Type[_Amount], data: BinaryData, check_validity: bool = True
    ) -> _Amount:
        "Return an Amount from the first 8 bytes of the provided data."

        stream = _bytesio_from_binarydata(data)
        value_bytes = stream.read(8)
        if len(value_bytes) != 8:
            err_msg = f"invalid amount size: {len(value_bytes)}"
            err_msg += " instead of 8 bytes"
            raise BTCAmountValueError(err_msg)
        value = int.from_bytes(value_bytes, byteorder="little", signed=False)
        return cls(value, check_validity)


def btc_field(**kwargs: Any) -> Any:
    """Return a dataclass field for an Amount member of a DataClassJsonMixin.

    The Amount is encoded as BTC decimal string (e.g. "0.1")
    and decoded from either a string or a JSON number.
    """

    return field(metadata=config(encoder=str, decoder=Amount.from_btc), **kwargs)


def valid_sats_amount(amount: Any, dust: int = 0) -> int:
    "Return the satoshi amount as int, if valid and not less than dust."

    if isinstance(amount, Amount):
        amount = amount.value
    if isinstance(amount, bool):
        raise BTCAmountTypeError(f"non-integer satoshi amount: {amount}")
    # any input that can be converted to int is fine
    sats = 0 if amount is None else int(amount)
    if amount is not None and sats != amount:
        raise BTCAmountTypeError(f"non-integer satoshi amount: {amount}")
    if not dust <= sats <= MAX_SATOSHI:
        raise BTCAmountValueError(f"invalid satoshi amount: {amount}")
    return sats


def btc_from_sats(amount: int) -> Decimal:
    "Return the BTC Decimal equivalent of the provided satoshi amount."

    sats = valid_sats_amount(amount)
    # normalize() strips the rightmost trailing zeros
    # and produces canonical values for attributes of an equivalence class
    return (sats * _BITCOIN_PER_SATOSHI).normalize()


def valid_btc_amount(amount: Any, dust: Decimal = Decimal("0")) -> Decimal:
    "Return the BTC amount as Decimal, if valid and not less than dust."

    btc = Amount.from_btc(0 if amount is None else amount).btc
    if btc < dust:
        raise BTCAmountValueError(f"BTC amount below dust: {amount}")
    return btc


def sats_from_btc(amount: BTCValue) -> int:
    "Return the satoshi equivalent of the provided BTC amount."

    return Amount.from_btc(amount).value
