"""Domain Types — verifies operation enum, identity and secret wrapper.

Tests:
    - Operation has exactly the eight names, case-sensitive values
    - CounterIdentity is immutable
    - AdminKey never prints its value; reveal() returns it
"""

import dataclasses
import logging

import pytest

from counterops.core.domain_types import AdminKey, CounterIdentity, Operation


def test_operation_has_exactly_eight_members():
    assert {op.value for op in Operation} == {
        "hit", "create", "get", "info", "set", "update", "reset", "delete",
    }


def test_operation_lookup_is_case_sensitive():
    with pytest.raises(ValueError):
        Operation("Hit")


def test_counter_identity_is_frozen():
    identity = CounterIdentity("ci-acme", "build-api")
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.key = "other"


def test_admin_key_masks_repr_and_str():
    key = AdminKey("sekret123")
    assert "sekret123" not in repr(key)
    assert "sekret123" not in str(key)
    assert "sekret123" not in f"{key}"


def test_admin_key_reveal_returns_value():
    assert AdminKey("sekret123").reveal() == "sekret123"


def test_admin_key_truthiness_tracks_emptiness():
    assert AdminKey("x")
    assert not AdminKey("")


def test_admin_key_equality():
    assert AdminKey("a") == AdminKey("a")
    assert AdminKey("a") != AdminKey("b")
    assert AdminKey("a") != "a"


def test_admin_key_masked_when_logged(caplog):
    with caplog.at_level(logging.INFO):
        logging.getLogger("test").info("key is %s", AdminKey("sekret123"))
    assert "sekret123" not in caplog.text
