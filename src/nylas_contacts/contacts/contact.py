"""
Nylas Contacts

Thin facade over the contacts endpoints. Every operation follows the same
steps: fill in the default access token, validate against the endpoint's
schema, route the fields into path/query/body/header and make exactly one
transport call. Invalid input raises InvalidParams before any request is
built; transport failures propagate unchanged.
"""
import logging
from typing import Any, Dict, Mapping, Optional

from nylas_contacts.contacts import rules
from nylas_contacts.exceptions import InvalidParams
from nylas_contacts.routing import TOKEN_FIELD, Placement, Route, build_request, dispatch, with_token
from nylas_contacts.validation import FieldSchema, validate

logger = logging.getLogger(__name__)

LIST_CONTACTS = Route("contacts", "get", placement=Placement.QUERY)
GET_CONTACT = Route("oneContact", "get", path_fields=("id",))
ADD_CONTACT = Route("contacts", "post", placement=Placement.FORM)
UPDATE_CONTACT = Route("oneContact", "put", path_fields=("id",), placement=Placement.FORM)
DELETE_CONTACT = Route("oneContact", "delete", path_fields=("id",))
GET_CONTACT_GROUPS = Route("contactsGroups", "get")
GET_CONTACT_PICTURE = Route("contactPic", "get", path_fields=("id",))


class Contact:
    def __init__(self, options):
        """
        Args:
            options: credential store and transport factory, normally an
                nylas_contacts.options.Options
        """
        self.options = options

    def get_contacts_list(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        """List contacts; filters (limit, offset, email, ...) go in the query string."""
        return self._execute(rules.LIST_CONTACTS_RULES, LIST_CONTACTS, params or {})

    def get_contact(self, contact_id: str, access_token: Optional[str] = None) -> Any:
        params = {"id": contact_id, TOKEN_FIELD: access_token}
        return self._execute(rules.CONTACT_ID_RULES, GET_CONTACT, params)

    def add_contact(self, params: Mapping[str, Any]) -> Any:
        """Create a contact; fields are sent as the request body."""
        return self._execute(rules.ADD_CONTACT_RULES, ADD_CONTACT, params)

    def update_contact(self, params: Mapping[str, Any]) -> Any:
        """Update the contact named by params['id'] with the remaining fields."""
        return self._execute(rules.UPDATE_CONTACT_RULES, UPDATE_CONTACT, params)

    def delete_contact(self, contact_id: str, access_token: Optional[str] = None) -> Any:
        params = {"id": contact_id, TOKEN_FIELD: access_token}
        return self._execute(rules.CONTACT_ID_RULES, DELETE_CONTACT, params)

    def get_contact_groups(self, access_token: Optional[str] = None) -> Any:
        return self._execute(rules.TOKEN_ONLY_RULES, GET_CONTACT_GROUPS, {TOKEN_FIELD: access_token})

    def get_contact_picture(self, contact_id: str, access_token: Optional[str] = None) -> Any:
        """Returns the raw image bytes as delivered by the transport."""
        params = {"id": contact_id, TOKEN_FIELD: access_token}
        return self._execute(rules.CONTACT_ID_RULES, GET_CONTACT_PICTURE, params)

    def _execute(self, schema: FieldSchema, route: Route, params: Mapping[str, Any]) -> Any:
        filled: Dict[str, Any] = with_token(params, self.options)

        result = validate(schema, filled)
        if not result.ok:
            logger.warning(f"Invalid params for {route.method.upper()} {route.endpoint}: {list(result.fields)}")
            raise InvalidParams(result.violations)

        descriptor = build_request(route, result.values)
        return dispatch(descriptor, self.options.get_request())
