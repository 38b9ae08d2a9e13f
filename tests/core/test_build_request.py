"""Request Building — remote call shape per operation.

Tests cover:
    - Method and path for every operation
    - create always carries initializer, default 0
    - set/update send the integer as `value`; update keeps the sign
    - Admin key placed in the Authorization header, never in path or params
    - repr of a RemoteCall never exposes the admin key
"""

import pytest

from counterops.core.build_request import build_request, counter_path
from counterops.core.domain_types import AdminKey, CounterIdentity, Operation
from counterops.core.operation_requests import (
    CreateRequest, DeleteRequest, GetRequest, HitRequest,
    InfoRequest, ResetRequest, SetRequest, UpdateRequest,
)
from counterops.core.validate_inputs import validate_inputs

IDENTITY = CounterIdentity("ci-acme", "build-api")
KEY = AdminKey("sekret123")


@pytest.mark.parametrize("request_obj,method,path", [
    (HitRequest(IDENTITY), "GET", "/hit/ci-acme/build-api"),
    (CreateRequest(IDENTITY), "POST", "/create/ci-acme/build-api"),
    (GetRequest(IDENTITY), "GET", "/get/ci-acme/build-api"),
    (InfoRequest(IDENTITY), "GET", "/info/ci-acme/build-api"),
    (SetRequest(IDENTITY, 5, KEY), "POST", "/set/ci-acme/build-api"),
    (UpdateRequest(IDENTITY, 5, KEY), "POST", "/update/ci-acme/build-api"),
    (ResetRequest(IDENTITY, KEY), "POST", "/reset/ci-acme/build-api"),
    (DeleteRequest(IDENTITY, KEY), "POST", "/delete/ci-acme/build-api"),
])
def test_method_and_path(request_obj, method, path):
    call = build_request(request_obj)
    assert call.method == method
    assert call.path == path
    assert call.operation == request_obj.operation


def test_create_with_omitted_initializer_sends_zero():
    request = validate_inputs("create", {"namespace": "ci-acme", "key": "build-api"})
    call = build_request(request)
    assert call.params == {"initializer": 0}


def test_create_with_initializer_sends_it():
    call = build_request(CreateRequest(IDENTITY, initializer=250))
    assert call.params == {"initializer": 250}


def test_update_sends_signed_delta_as_value():
    call = build_request(UpdateRequest(IDENTITY, -10, KEY))
    assert call.params == {"value": -10}


def test_set_sends_value():
    call = build_request(SetRequest(IDENTITY, 99, KEY))
    assert call.params == {"value": 99}


@pytest.mark.parametrize("request_obj", [
    HitRequest(IDENTITY), GetRequest(IDENTITY), InfoRequest(IDENTITY),
    ResetRequest(IDENTITY, KEY), DeleteRequest(IDENTITY, KEY),
])
def test_operations_without_integer_send_no_params(request_obj):
    assert build_request(request_obj).params == {}


@pytest.mark.parametrize("request_obj", [
    SetRequest(IDENTITY, 1, KEY), UpdateRequest(IDENTITY, 1, KEY),
    ResetRequest(IDENTITY, KEY), DeleteRequest(IDENTITY, KEY),
])
def test_admin_key_goes_in_authorization_header(request_obj):
    call = build_request(request_obj)
    assert call.authenticated
    assert call.headers() == {"Authorization": "Bearer sekret123"}
    assert "sekret123" not in call.path
    assert "sekret123" not in str(call.params)


@pytest.mark.parametrize("request_obj", [
    HitRequest(IDENTITY), CreateRequest(IDENTITY),
    GetRequest(IDENTITY), InfoRequest(IDENTITY),
])
def test_public_operations_send_no_credential(request_obj):
    call = build_request(request_obj)
    assert not call.authenticated
    assert call.headers() == {}


def test_remote_call_repr_hides_admin_key():
    call = build_request(DeleteRequest(IDENTITY, KEY))
    assert "sekret123" not in repr(call)


def test_counter_path_percent_encodes_segments():
    identity = CounterIdentity("team a/b", "key?x=1")
    assert counter_path(Operation.GET, identity) == "/get/team%20a%2Fb/key%3Fx%3D1"
