"""Shared fixtures: a mocked transport builder and credential store."""
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def transport():
    """Request builder mock; setters return the builder itself like the real one."""
    request = MagicMock(name="Request")
    for setter in ("set_path", "set_query", "set_form_params", "set_header_params"):
        getattr(request, setter).return_value = request
    return request


@pytest.fixture
def options(transport):
    """Options mock with a default token and the transport above."""
    opts = MagicMock(name="Options")
    opts.get_access_token.return_value = "tok_default"
    opts.get_request.return_value = transport
    return opts
