# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

"""
User identifiers carried by tokens.

A user is either a numeric ``Uid`` or a string ``Account``. Both end up as a
string on the wire; ``Uid(0)`` is the wildcard and is written as an empty
string.
"""

import secrets

from TokenConfig import ACCOUNT_MAX_LENGTH, UID_MAX
from TokenErrors import InvalidAccountId


class Uid:

    def __init__(self, value):
        self.value = int(value)

    def __str__(self):
        if self.value == 0:
            return ""
        return str(self.value)

    def __eq__(self, other):
        return isinstance(other, Uid) and other.value == self.value

    def __hash__(self):
        return hash((Uid, self.value))

    def __repr__(self):
        return "Uid(%d)" % self.value


class Account:

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, Account) and other.value == self.value

    def __hash__(self):
        return hash((Account, self.value))

    def __repr__(self):
        return "Account(%r)" % self.value


def user_id(value):
    """Wrap a plain int or str into a Uid or an Account."""
    if isinstance(value, (Uid, Account)):
        return value
    if isinstance(value, bool):
        raise InvalidAccountId("The userId must be either an integer or a string.")
    if isinstance(value, int):
        return Uid(value)
    if isinstance(value, str):
        return Account(value)
    raise InvalidAccountId("The userId must be either an integer or a string.",
                           details={"type": type(value).__name__})


def is_valid_uid(value):
    return 1 <= value <= UID_MAX


def assert_account_id(value):
    """Raise InvalidAccountId unless value is a usable uid or account."""
    value = user_id(value)

    if isinstance(value, Uid):
        if not is_valid_uid(value.value):
            raise InvalidAccountId(
                "The UID value must be an integer in the range [1,%d]." % UID_MAX,
                details={"uid": value.value})
        return value

    length = len(value.value)
    if length < 1:
        raise InvalidAccountId("The User account length must be at least [1] character.")
    if length > ACCOUNT_MAX_LENGTH:
        raise InvalidAccountId(
            "The User account length exceeds the maximum allowed [%d] characters." % ACCOUNT_MAX_LENGTH,
            details={"length": length})
    if not value.value.isascii():
        raise InvalidAccountId("The User account must contain only ASCII characters.")
    return value


def generate_uid():
    return secrets.randbelow(UID_MAX) + 1
