"""Composable shape validators for parsed entity documents.

A validator is a callable ``(value, path) -> ValidationFailure | None``.
``None`` means the value passed. Absent fields are passed in as ``MISSING``
so they can be told apart from an explicit ``null``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from .errors import ValidationFailure, ViolationCategory


class _Missing:
    """Marker for a field that is not present in its parent object."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

Validator = Callable[[Any, str], "ValidationFailure | None"]


def describe_type(value: Any) -> str:
    """Name a value's type the way it appears in a YAML/JSON document."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def join_path(parent: str, name: str) -> str:
    """Join a dotted field path."""
    return f"{parent}.{name}" if parent else name


def lookup(obj: Mapping[str, Any], name: str) -> Any:
    """Get a field from a mapping, or MISSING if absent."""
    return obj.get(name, MISSING)


def missing(path: str) -> ValidationFailure:
    return ValidationFailure(
        path=path,
        category=ViolationCategory.MISSING_FIELD,
        message=f'Missing required field "{path}"',
    )


def mismatch(path: str, expected: str, value: Any) -> ValidationFailure:
    return ValidationFailure(
        path=path,
        category=ViolationCategory.TYPE_MISMATCH,
        message=f'Field "{path}" must be {expected}, got {describe_type(value)}',
    )


def require_string(value: Any, path: str) -> ValidationFailure | None:
    """Value must be a string."""
    if value is MISSING:
        return missing(path)
    if not isinstance(value, str):
        return mismatch(path, "a string", value)
    return None


def require_non_empty_string(value: Any, path: str) -> ValidationFailure | None:
    """Value must be a string other than ``""``. No trimming is applied."""
    failure = require_string(value, path)
    if failure is not None:
        return failure
    if value == "":
        return ValidationFailure(
            path=path,
            category=ViolationCategory.EMPTY_VALUE,
            message=f'Field "{path}" must not be empty',
        )
    return None


def optional(validator: Validator) -> Validator:
    """Let an absent value pass; delegate any present value (even null)."""

    def check(value: Any, path: str) -> ValidationFailure | None:
        if value is MISSING:
            return None
        return validator(value, path)

    return check


def array_of(element_validator: Validator) -> Validator:
    """Value must be an array whose elements all pass ``element_validator``.

    The first failing index is reported as ``path[index]``.
    """

    def check(value: Any, path: str) -> ValidationFailure | None:
        if value is MISSING:
            return missing(path)
        if not isinstance(value, (list, tuple)):
            return mismatch(path, "an array", value)
        for index, item in enumerate(value):
            failure = element_validator(item, f"{path}[{index}]")
            if failure is not None:
                return failure
        return None

    return check


def object_shape(fields: Mapping[str, Validator]) -> Validator:
    """Value must be an object; declared fields are checked in order.

    Fields that are not declared are ignored.
    """
    declared = tuple(fields.items())

    def check(value: Any, path: str) -> ValidationFailure | None:
        if value is MISSING:
            return missing(path)
        if not isinstance(value, Mapping):
            return mismatch(path, "an object", value)
        for name, validator in declared:
            failure = validator(lookup(value, name), join_path(path, name))
            if failure is not None:
                return failure
        return None

    return check


def mapping_of(value_validator: Validator) -> Validator:
    """Value must be an object whose values all pass ``value_validator``."""

    def check(value: Any, path: str) -> ValidationFailure | None:
        if value is MISSING:
            return missing(path)
        if not isinstance(value, Mapping):
            return mismatch(path, "an object", value)
        for key, item in value.items():
            failure = value_validator(item, join_path(path, str(key)))
            if failure is not None:
                return failure
        return None

    return check
