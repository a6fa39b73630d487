#!/usr/bin/env python3

# Copyright (C) 2017-2022 The btcamount developers
#
# This file is part of btcamount. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcamount including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from decimal import Decimal
from io import BytesIO
from typing import Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g. the 8 bytes little endian serialization of 253583 satoshis:
# "8fde030000000000"
# "8fde0300 00000000"
Octets = Union[bytes, str]

# bytes-like or text string (not hex-string)
#
# decimal amount strings are 'ascii' text, e.g.
# "0.00253583"
# "+21000000"
# b"0.1"
#
# leading/trailing blanks are never stripped:
# " 1" is not a valid amount
String = Union[bytes, bytearray, memoryview, str]

# binary data, usually to be cosumed as byte stream,
# but possibily provided as Octets too
BinaryData = Union[BytesIO, Octets]

# BTC denominated value: decimal text or a number to be rendered as such,
# e.g. "0.1", Decimal("0.1"), 21, 0.1 (float is rendered with its repr)
BTCValue = Union[String, Decimal, int, float]
