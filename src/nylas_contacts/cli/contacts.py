import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from nylas_contacts import logging_setup
from nylas_contacts.contacts import Contact
from nylas_contacts.exceptions import InvalidParams, TransportError
from nylas_contacts.options import Options

logger = logging.getLogger(__name__)


def parse_params(pairs: Optional[List[str]]) -> Dict[str, Any]:
    """Turn `key=value` pairs into a dict; values are read as JSON when they parse, else kept as strings."""
    params: Dict[str, Any] = {}
    for pair in pairs or []:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"expected key=value, got {pair!r}")
        try:
            params[name] = json.loads(raw)
        except ValueError:
            params[name] = raw
    return params


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Query and edit Nylas contacts")
    p.add_argument("--access_token", help="Access token (defaults to NYLAS_ACCESS_TOKEN)")
    p.add_argument("--log_level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to APP_LOG_LEVEL")

    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List contacts")
    ls.add_argument("--param", action="append", help="Filter as key=value, repeatable (e.g. limit=10)")

    get = sub.add_parser("get", help="Show one contact")
    get.add_argument("contact_id")

    add = sub.add_parser("add", help="Create a contact")
    add.add_argument("--param", action="append", help="Field as key=value, repeatable (e.g. given_name=Jo)")

    upd = sub.add_parser("update", help="Update a contact")
    upd.add_argument("contact_id")
    upd.add_argument("--param", action="append", help="Field as key=value, repeatable")

    rm = sub.add_parser("delete", help="Delete a contact")
    rm.add_argument("contact_id")

    sub.add_parser("groups", help="List contact groups")

    pic = sub.add_parser("picture", help="Download a contact picture")
    pic.add_argument("contact_id")
    pic.add_argument("--out", required=True, help="Path to write the image to")

    return p


def run(a: argparse.Namespace, contact: Contact) -> Any:
    token = a.access_token
    if a.command == "list":
        params = parse_params(a.param)
        if token is not None:
            params["access_token"] = token
        return contact.get_contacts_list(params)
    if a.command == "get":
        return contact.get_contact(a.contact_id, token)
    if a.command == "add":
        params = parse_params(a.param)
        if token is not None:
            params["access_token"] = token
        return contact.add_contact(params)
    if a.command == "update":
        params = parse_params(a.param)
        params["id"] = a.contact_id
        if token is not None:
            params["access_token"] = token
        return contact.update_contact(params)
    if a.command == "delete":
        return contact.delete_contact(a.contact_id, token)
    if a.command == "groups":
        return contact.get_contact_groups(token)
    if a.command == "picture":
        image = contact.get_contact_picture(a.contact_id, token)
        if not isinstance(image, bytes):
            raise TransportError(f"contact {a.contact_id} has no picture data (got {type(image).__name__})")
        out = Path(a.out)
        out.write_bytes(image)
        logger.info(f"Wrote {out}")
        return {"path": str(out), "bytes": len(image)}
    raise ValueError(f"unknown command {a.command}")


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    a = p.parse_args(argv)

    # Initialize logging
    logging_setup.setup_logging(a.log_level)

    try:
        with Options() as options:
            result = run(a, Contact(options))
    except argparse.ArgumentTypeError as e:
        p.error(str(e))
    except InvalidParams as e:
        logger.error(str(e))
        return 2
    except TransportError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0

if __name__ == "__main__":
    sys.exit(main())
