"""
Tests for uid / account identifiers.
"""

import pytest

from TokenErrors import InvalidAccountId
from UserAccount import Account, Uid, assert_account_id, generate_uid, is_valid_uid, user_id


def test_user_id_wraps_plain_values():
    assert user_id(12345) == Uid(12345)
    assert user_id("alice") == Account("alice")
    assert user_id(Account("bob")) == Account("bob")


def test_string_form():
    assert str(Uid(0)) == ""
    assert str(Uid(2882341273)) == "2882341273"
    assert str(Account("2882341273")) == "2882341273"
    assert str(Account("")) == ""


def test_uid_and_account_are_distinct():
    assert Uid(1) != Account("1")


@pytest.mark.parametrize("value", [1, 4294967295, "a", "x" * 255, "user-01@example"])
def test_valid_account_ids(value):
    assert assert_account_id(value) == user_id(value)


@pytest.mark.parametrize("value", [0, -1, 4294967296, "", "x" * 256, "café", 1.5, None])
def test_invalid_account_ids(value):
    with pytest.raises(InvalidAccountId) as exc_info:
        assert_account_id(value)
    assert exc_info.value.code == "INVALID_ACCOUNT_ID"


def test_generate_uid_in_range():
    for _ in range(100):
        assert is_valid_uid(generate_uid())
