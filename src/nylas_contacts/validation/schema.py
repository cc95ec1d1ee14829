"""Field schemas and the validation engine."""
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Tuple, Union

from nylas_contacts.validation.constraints import Constraint, ViolationKind


@dataclass(frozen=True)
class FieldRule:
    name: str
    constraints: Tuple[Constraint, ...] = ()
    required: bool = True


@dataclass(frozen=True)
class Violation:
    field: str
    kind: ViolationKind
    message: str

    def __str__(self) -> str:
        return f"{self.field} {self.message}"


def key(name: str, *constraints: Union[Constraint, Tuple[Constraint, ...]], required: bool = True) -> FieldRule:
    """
    Build a FieldRule; tuples returned by composite helpers such as
    `non_empty_string()` are flattened in place.
    """
    flat: list[Constraint] = []
    for c in constraints:
        if isinstance(c, tuple):
            flat.extend(c)
        else:
            flat.append(c)
    return FieldRule(name=name, constraints=tuple(flat), required=required)


@dataclass(frozen=True)
class FieldSchema:
    """Ordered set of field rules with unique names."""
    rules: Tuple[FieldRule, ...] = ()

    def __post_init__(self):
        names = [r.name for r in self.rules]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate field names in schema: {duplicates}")

    @classmethod
    def of(cls, *rules: FieldRule) -> "FieldSchema":
        return cls(tuple(rules))

    def extend(self, *rules: FieldRule) -> "FieldSchema":
        """Return a new schema with `rules` added; a rule with an existing name replaces it in place."""
        replacements = {r.name: r for r in rules}
        merged = [replacements.pop(r.name, r) for r in self.rules]
        merged.extend(r for r in rules if r.name in replacements)
        return FieldSchema(tuple(merged))

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(r.name for r in self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __contains__(self, name: object) -> bool:
        return name in self.names


@dataclass(frozen=True)
class ValidationResult:
    values: Mapping[str, Any]
    violations: Tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(v.field for v in self.violations)


def _check(rule: FieldRule, value: Any) -> Iterable[Violation]:
    for constraint in rule.constraints:
        if not constraint(value):
            yield Violation(rule.name, constraint.kind, constraint.description)
            # later constraints assume the earlier ones held
            return


def validate(schema: FieldSchema, params: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a loosely-typed map against `schema`.

    Every rule is checked and all violations are collected. Keys that the schema
    does not name are left alone, so newer API fields pass through. `params`
    is not mutated; `values` on the result is a shallow copy of it.
    """
    violations: list[Violation] = []
    for rule in schema:
        if rule.name not in params:
            if rule.required:
                violations.append(Violation(rule.name, ViolationKind.MISSING_REQUIRED, "is required"))
            continue
        violations.extend(_check(rule, params[rule.name]))
    return ValidationResult(values=dict(params), violations=tuple(violations))
