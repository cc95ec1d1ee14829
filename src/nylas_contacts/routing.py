"""
Parameter routing: turns a validated field map into a transport request.

Each operation declares a Route (endpoint key, HTTP verb, which fields become
path segments and where the remaining fields go). `build_request` applies the
route to a validated map and produces an immutable RequestDescriptor;
`dispatch` hands that descriptor to a transport builder.

The access token never travels in the query string or body: it is always
stripped from the map and sent as the Authorization header.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

from nylas_contacts.adapters.nylas.endpoints import API_LIST

logger = logging.getLogger(__name__)

TOKEN_FIELD = "access_token"
AUTH_HEADER = "Authorization"


class Placement(Enum):
    NONE = "none"    # leftover fields are dropped
    QUERY = "query"
    FORM = "form"


@dataclass(frozen=True)
class Route:
    endpoint: str  # key in API_LIST
    method: str    # transport verb: get, post, put, delete
    path_fields: Tuple[str, ...] = ()
    placement: Placement = Placement.NONE


def _frozen(d: Optional[Dict[str, Any]] = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(d or {}))


@dataclass(frozen=True)
class RequestDescriptor:
    operation_key: str
    method: str
    path_params: Tuple[str, ...] = ()
    header_params: Mapping[str, str] = field(default_factory=_frozen)
    query_params: Mapping[str, Any] = field(default_factory=_frozen)
    body_params: Mapping[str, Any] = field(default_factory=_frozen)


class CredentialStore(Protocol):
    def get_access_token(self) -> Optional[str]: ...


def resolve_token(explicit: Optional[str], store: CredentialStore) -> Optional[str]:
    """Caller's token if given, otherwise the store's default (which may be None)."""
    if explicit is not None:
        return explicit
    return store.get_access_token()


def with_token(params: Mapping[str, Any], store: CredentialStore) -> Dict[str, Any]:
    """
    Copy of `params` with the access token filled in from `store` when missing.

    A missing default leaves the key out entirely so validation reports it as
    a missing required field rather than passing a None along.
    """
    filled = dict(params)
    token = resolve_token(filled.get(TOKEN_FIELD), store)
    if token is None:
        filled.pop(TOKEN_FIELD, None)
    else:
        filled[TOKEN_FIELD] = token
    return filled


def build_request(route: Route, values: Mapping[str, Any]) -> RequestDescriptor:
    remaining = dict(values)
    token = remaining.pop(TOKEN_FIELD)
    path = tuple(str(remaining.pop(name)) for name in route.path_fields)

    return RequestDescriptor(
        operation_key=route.endpoint,
        method=route.method,
        path_params=path,
        header_params=_frozen({AUTH_HEADER: token}),
        query_params=_frozen(remaining if route.placement is Placement.QUERY else None),
        body_params=_frozen(remaining if route.placement is Placement.FORM else None),
    )


def dispatch(descriptor: RequestDescriptor, request, endpoints: Mapping[str, str] = API_LIST) -> Any:
    """
    Apply `descriptor` to a transport builder and fire the verb.

    Whatever the transport returns or raises is passed through untouched.
    """
    if descriptor.path_params:
        request.set_path(list(descriptor.path_params))
    if descriptor.query_params:
        request.set_query(dict(descriptor.query_params))
    if descriptor.method in ("post", "put"):
        request.set_form_params(dict(descriptor.body_params))
    request.set_header_params(dict(descriptor.header_params))

    logger.debug(
        f"{descriptor.method.upper()} {descriptor.operation_key} "
        f"path={list(descriptor.path_params)} fields={sorted(descriptor.query_params or descriptor.body_params)}"
    )
    verb = getattr(request, descriptor.method)
    return verb(endpoints[descriptor.operation_key])
