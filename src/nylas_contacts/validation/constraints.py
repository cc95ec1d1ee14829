"""
Constraint combinators for field validation.

A constraint is a pure predicate over the dynamic value domain (str, int, bool,
list, dict, None) tagged with the violation kind it reports and a short
human-readable description. Constraints for one field are chained in order
and the first failing one names the violation, so `non_empty_string()`
reports a wrong type for `3` and an empty string for `"  "`.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Tuple


class ViolationKind(Enum):
    MISSING_REQUIRED = "missing-required"
    WRONG_TYPE = "wrong-type"
    EMPTY_STRING = "empty-string"
    OUT_OF_RANGE = "out-of-range"
    BAD_FORMAT = "bad-format"


@dataclass(frozen=True)
class Constraint:
    kind: ViolationKind
    description: str
    test: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return bool(self.test(value))


_ATEXT = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]"

# Local part is an RFC 5322 dot-atom (no leading, trailing or doubled dots),
# domain made of DNS labels with at least one dot
_EMAIL_RE = re.compile(
    rf"{_ATEXT}+(?:\.{_ATEXT}+)*"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+"
)


def _is_int(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def _is_email(value: Any) -> bool:
    return isinstance(value, str) and _EMAIL_RE.fullmatch(value) is not None


def _is_iso_datetime(value: Any) -> bool:
    # wider than a strict full date-time: date-only values and naive date-times pass too
    if not isinstance(value, str) or not value:
        return False
    for parse in (date.fromisoformat, datetime.fromisoformat):
        try:
            parse(value)
            return True
        except ValueError:
            continue
    return False


def string_type() -> Constraint:
    return Constraint(ViolationKind.WRONG_TYPE, "must be a string", lambda v: isinstance(v, str))


def non_empty_string() -> Tuple[Constraint, Constraint]:
    return (
        string_type(),
        Constraint(ViolationKind.EMPTY_STRING, "must be a non-empty string", lambda v: v.strip() != ""),
    )


def int_type() -> Constraint:
    return Constraint(ViolationKind.WRONG_TYPE, "must be an integer", _is_int)


def min_value(minimum: int) -> Constraint:
    """Inclusive lower bound; only meaningful after a type constraint."""
    return Constraint(ViolationKind.OUT_OF_RANGE, f"must be >= {minimum}", lambda v: v >= minimum)


def bool_type() -> Constraint:
    return Constraint(ViolationKind.WRONG_TYPE, "must be a boolean", lambda v: isinstance(v, bool))


def email() -> Constraint:
    return Constraint(ViolationKind.BAD_FORMAT, "must be a valid email", _is_email)


def iso_datetime() -> Constraint:
    return Constraint(ViolationKind.BAD_FORMAT, "must be an ISO-8601 date", _is_iso_datetime)


def array_val() -> Constraint:
    """Any ordered sequence (list or tuple)."""
    return Constraint(ViolationKind.WRONG_TYPE, "must be an array", lambda v: isinstance(v, (list, tuple)))


def array_type() -> Constraint:
    """Strictly a list."""
    return Constraint(ViolationKind.WRONG_TYPE, "must be a list", lambda v: isinstance(v, list))


def each(inner: Constraint) -> Constraint:
    """Applies `inner` to every item of a sequence."""
    def test(value: Any) -> bool:
        return isinstance(value, (list, tuple)) and all(inner(item) for item in value)
    return Constraint(inner.kind, f"each item {inner.description}", test)
