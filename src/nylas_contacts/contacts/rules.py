# Field schemas for the Nylas contacts endpoints.
# Each schema lists every field the endpoint understands; only the access token
# (and the contact id where the route needs one) is required. Keys outside a
# schema are not rejected and are sent to the API as given.
from nylas_contacts.routing import TOKEN_FIELD
from nylas_contacts.validation import (
    FieldSchema,
    array_type,
    array_val,
    bool_type,
    each,
    email,
    int_type,
    iso_datetime,
    key,
    min_value,
    non_empty_string,
)

TOKEN_RULE = key(TOKEN_FIELD, non_empty_string())
ID_RULE = key("id", non_empty_string())

# Filters accepted by GET /contacts
LIST_CONTACTS_RULES = FieldSchema.of(
    key("limit", int_type(), min_value(1), required=False),
    key("offset", int_type(), min_value(0), required=False),

    key("email", email(), required=False),
    key("state", non_empty_string(), required=False),
    key("group", non_empty_string(), required=False),
    key("source", non_empty_string(), required=False),
    key("country", non_empty_string(), required=False),

    key("recurse", bool_type(), required=False),
    key("postal_code", non_empty_string(), required=False),
    key("phone_number", non_empty_string(), required=False),
    key("street_address", non_empty_string(), required=False),

    TOKEN_RULE,
)

# Writable contact fields for POST /contacts
ADD_CONTACT_RULES = FieldSchema.of(
    key("given_name", non_empty_string(), required=False),
    key("middle_name", non_empty_string(), required=False),
    key("surname", non_empty_string(), required=False),
    key("birthday", iso_datetime(), required=False),
    key("suffix", non_empty_string(), required=False),
    key("nickname", non_empty_string(), required=False),
    key("company_name", non_empty_string(), required=False),
    key("job_title", non_empty_string(), required=False),

    key("manager_name", non_empty_string(), required=False),
    key("office_location", non_empty_string(), required=False),
    key("notes", non_empty_string(), required=False),
    key("emails", array_val(), each(email()), required=False),

    key("im_addresses", array_type(), required=False),
    key("physical_addresses", array_type(), required=False),
    key("phone_numbers", array_type(), required=False),
    key("web_pages", array_type(), required=False),

    TOKEN_RULE,
)

# PUT /contacts/{id} takes the same fields plus the id
UPDATE_CONTACT_RULES = ADD_CONTACT_RULES.extend(ID_RULE)

# Operations addressed by contact id only
CONTACT_ID_RULES = FieldSchema.of(ID_RULE, TOKEN_RULE)

TOKEN_ONLY_RULES = FieldSchema.of(TOKEN_RULE)
