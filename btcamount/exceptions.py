#!/usr/bin/env python3

# Copyright (C) 2017-2022 The btcamount developers
#
# This file is part of btcamount. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcamount including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic classes are only meant to discriminate between Exceptions
raised by btcamount and those raised by other codebase:
they derive from the regular ValueError, TypeError, and RuntimeError.

Two distinct failure contracts exist:

* ParseAmountError (a ValueError) is the recoverable outcome of
  parsing untrusted text; its subclasses tag the failure kind.
* AmountRangeError (a RuntimeError) is a violated precondition,
  i.e. a programming error: an out-of-range satoshi count reached
  the trusted constructor, arithmetic left the valid range,
  or a corrupt stored integer was deserialized.
"""

from enum import Enum


class BTCAmountValueError(ValueError):
    pass


class BTCAmountTypeError(TypeError):
    pass


class BTCAmountRuntimeError(RuntimeError):
    pass


class AmountRangeError(BTCAmountRuntimeError):
    pass


class ParseAmountErrorKind(Enum):
    NEGATIVE_AMOUNT = "negative amount"
    INVALID_AMOUNT = "invalid amount"
    TOO_LARGE = "amount too large"


class ParseAmountError(BTCAmountValueError):
    """Base class for the failures of parsing a BTC amount string.

    A failure raised without a more specific subclass is an invalid amount.
    """

    kind: ParseAmountErrorKind = ParseAmountErrorKind.INVALID_AMOUNT


class NegativeAmountError(ParseAmountError):
    kind = ParseAmountErrorKind.NEGATIVE_AMOUNT


class InvalidAmountError(ParseAmountError):
    kind = ParseAmountErrorKind.INVALID_AMOUNT


class TooLargeError(ParseAmountError):
    kind = ParseAmountErrorKind.TOO_LARGE
