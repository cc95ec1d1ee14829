# Nylas API endpoint templates, keyed by logical operation name.
# `{}` placeholders are filled in order with URL-quoted path segments.
from typing import Dict

API_LIST: Dict[str, str] = {
    "contacts":       "/contacts",
    "oneContact":     "/contacts/{}",
    "contactsGroups": "/contacts/groups",
    "contactPic":     "/contacts/{}/picture",
}
