"""Tests for token resolution, request building and dispatch."""
from unittest.mock import MagicMock

import pytest

from nylas_contacts.routing import (
    Placement,
    RequestDescriptor,
    Route,
    build_request,
    dispatch,
    resolve_token,
    with_token,
)


@pytest.fixture
def store():
    s = MagicMock(name="CredentialStore")
    s.get_access_token.return_value = "tok_default"
    return s


class TestResolveToken:

    def test_explicit_token_wins(self, store):
        assert resolve_token("tok_abc", store) == "tok_abc"
        store.get_access_token.assert_not_called()

    def test_falls_back_to_store(self, store):
        assert resolve_token(None, store) == "tok_default"

    def test_empty_string_is_not_replaced(self, store):
        assert resolve_token("", store) == ""

    def test_with_token_fills_missing(self, store):
        params = {"limit": 2}
        assert with_token(params, store) == {"limit": 2, "access_token": "tok_default"}
        assert params == {"limit": 2}

    def test_with_token_replaces_none(self, store):
        assert with_token({"access_token": None}, store) == {"access_token": "tok_default"}

    def test_with_token_drops_key_when_no_default(self, store):
        store.get_access_token.return_value = None
        assert with_token({"access_token": None, "id": "c1"}, store) == {"id": "c1"}


class TestBuildRequest:

    def test_query_placement(self):
        route = Route("contacts", "get", placement=Placement.QUERY)
        d = build_request(route, {"limit": 5, "access_token": "tok"})
        assert d.operation_key == "contacts"
        assert d.method == "get"
        assert d.path_params == ()
        assert dict(d.header_params) == {"Authorization": "tok"}
        assert dict(d.query_params) == {"limit": 5}
        assert dict(d.body_params) == {}

    def test_path_and_form_placement(self):
        route = Route("oneContact", "put", path_fields=("id",), placement=Placement.FORM)
        d = build_request(route, {"id": "c_1", "surname": "Doe", "access_token": "tok"})
        assert d.path_params == ("c_1",)
        assert dict(d.body_params) == {"surname": "Doe"}
        assert dict(d.query_params) == {}

    def test_no_placement_drops_leftovers(self):
        route = Route("contactsGroups", "get")
        d = build_request(route, {"access_token": "tok", "stray": 1})
        assert dict(d.query_params) == {}
        assert dict(d.body_params) == {}

    def test_descriptor_is_read_only(self):
        d = build_request(Route("contacts", "get", placement=Placement.QUERY), {"access_token": "tok"})
        with pytest.raises(TypeError):
            d.header_params["Authorization"] = "other"
        with pytest.raises(AttributeError):
            d.method = "post"


class TestDispatch:

    def test_get_with_query(self, transport):
        transport.get.return_value = {"data": []}
        d = build_request(Route("contacts", "get", placement=Placement.QUERY), {"limit": 1, "access_token": "tok"})

        assert dispatch(d, transport) == {"data": []}
        transport.set_query.assert_called_once_with({"limit": 1})
        transport.set_header_params.assert_called_once_with({"Authorization": "tok"})
        transport.set_path.assert_not_called()
        transport.set_form_params.assert_not_called()
        transport.get.assert_called_once_with("/contacts")

    def test_post_always_sets_body(self, transport):
        d = build_request(Route("contacts", "post", placement=Placement.FORM), {"access_token": "tok"})
        dispatch(d, transport)
        transport.set_form_params.assert_called_once_with({})
        transport.post.assert_called_once_with("/contacts")

    def test_custom_endpoint_table(self, transport):
        d = RequestDescriptor(operation_key="x", method="delete", path_params=("1",))
        dispatch(d, transport, endpoints={"x": "/things/{}"})
        transport.set_path.assert_called_once_with(["1"])
        transport.delete.assert_called_once_with("/things/{}")

    def test_transport_errors_propagate(self, transport):
        transport.get.side_effect = RuntimeError("boom")
        d = build_request(Route("contactsGroups", "get"), {"access_token": "tok"})
        with pytest.raises(RuntimeError, match="boom"):
            dispatch(d, transport)
