"""Declarative book schemas and the validator that checks payloads against them.

Two schema variants exist: ``create`` requires every field, ``update``
requires only ``isbn``, ``amazon_url``, ``author`` and ``language`` and
type-checks the rest when present. Violations come back as plain strings:

* ``instance requires property "<field>"`` for each missing required field,
* ``instance.<field> is not of a type(s) <type>`` for each mistyped field,
* ``instance.<field> must be greater than or equal to <n>`` (or ``less than``)
  for each well-typed integer outside its declared range,

missing-field messages first, then type messages, then range messages, each
group in field declaration order.
"""
from dataclasses import dataclass
from enum import Enum as PyEnum
from typing import Any, Optional

from pydantic import StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

# Strict so that "304" is not an integer and 304 is not a string
TYPE_ADAPTERS: dict[str, TypeAdapter] = {
    "string": TypeAdapter(StrictStr),
    "integer": TypeAdapter(StrictInt),
}

# Signed 32-bit INTEGER column range shared by SQLite and PostgreSQL
INT32_MAX = 2**31 - 1


class SchemaMode(str, PyEnum):
    """Which schema variant a payload is checked against."""
    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class FieldRule:
    """A single declared property, its JSON type and optional inclusive bounds."""

    name: str
    json_type: str
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    def matches(self, value: Any) -> bool:
        try:
            TYPE_ADAPTERS[self.json_type].validate_python(value)
        except PydanticValidationError:
            return False
        return True

    def range_violations(self, value: Any) -> list[str]:
        """Bound messages for a value that already matches the type."""
        violations = []
        if self.minimum is not None and value < self.minimum:
            violations.append(
                f"instance.{self.name} must be greater than or equal to {self.minimum}"
            )
        if self.maximum is not None and value > self.maximum:
            violations.append(
                f"instance.{self.name} must be less than or equal to {self.maximum}"
            )
        return violations


@dataclass(frozen=True)
class BookSchema:
    """Ordered field rules plus the subset of field names that must be present."""

    fields: tuple[FieldRule, ...]
    required: frozenset[str]

    def validate(self, instance: Any) -> list[str]:
        if not isinstance(instance, dict):
            return ["instance is not of a type(s) object"]

        violations = [
            f'instance requires property "{rule.name}"'
            for rule in self.fields
            if rule.name in self.required and rule.name not in instance
        ]
        present = [rule for rule in self.fields if rule.name in instance]
        well_typed = [rule for rule in present if rule.matches(instance[rule.name])]
        violations.extend(
            f"instance.{rule.name} is not of a type(s) {rule.json_type}"
            for rule in present
            if rule not in well_typed
        )
        for rule in well_typed:
            violations.extend(rule.range_violations(instance[rule.name]))
        return violations


BOOK_FIELD_RULES = (
    FieldRule("isbn", "string"),
    FieldRule("amazon_url", "string"),
    FieldRule("author", "string"),
    FieldRule("language", "string"),
    FieldRule("pages", "integer", minimum=1, maximum=INT32_MAX),
    FieldRule("publisher", "string"),
    FieldRule("title", "string"),
    FieldRule("year", "integer", minimum=-9999, maximum=9999),
)

CREATE_SCHEMA = BookSchema(
    fields=BOOK_FIELD_RULES,
    required=frozenset(rule.name for rule in BOOK_FIELD_RULES),
)

# isbn is still required in the body even though the path carries it
UPDATE_SCHEMA = BookSchema(
    fields=BOOK_FIELD_RULES,
    required=frozenset({"isbn", "amazon_url", "author", "language"}),
)

_SCHEMAS = {
    SchemaMode.CREATE: CREATE_SCHEMA,
    SchemaMode.UPDATE: UPDATE_SCHEMA,
}


def get_schema(mode: SchemaMode) -> BookSchema:
    """Return the schema variant for ``mode``."""
    return _SCHEMAS[SchemaMode(mode)]


def validate_book(instance: Any, mode: SchemaMode) -> list[str]:
    """Validate ``instance`` against the ``mode`` schema.

    Returns the ordered list of violation messages; an empty list means the
    payload is valid.
    """
    return get_schema(mode).validate(instance)
