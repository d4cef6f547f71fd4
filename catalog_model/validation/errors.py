"""Violation taxonomy for entity policies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViolationCategory(str, Enum):
    """Kinds of policy violations."""

    INVALID_API_VERSION = "InvalidApiVersion"
    INVALID_KIND = "InvalidKind"
    MISSING_FIELD = "MissingField"
    TYPE_MISMATCH = "TypeMismatch"
    EMPTY_VALUE = "EmptyValue"


@dataclass(frozen=True)
class ValidationFailure:
    """A single violation found by a validator.

    Validators return this instead of raising, so a pipeline can stop at the
    first failure without using exceptions for control flow.
    """

    path: str
    category: ViolationCategory
    message: str

    def to_error(self) -> "EntityPolicyError":
        """Convert to the matching exception."""
        error_class = _ERROR_CLASSES.get(self.category, EntityPolicyError)
        return error_class(self)

    def __str__(self) -> str:
        return self.message


class EntityPolicyError(ValueError):
    """Raised when an entity is rejected by a policy."""

    def __init__(self, failure: ValidationFailure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def path(self) -> str:
        return self.failure.path

    @property
    def category(self) -> ViolationCategory:
        return self.failure.category


class InvalidApiVersionError(EntityPolicyError):
    """The declared apiVersion is not recognized for the kind."""


class InvalidKindError(EntityPolicyError):
    """The kind does not match the policy."""


class MissingFieldError(EntityPolicyError):
    """A required field is absent."""


class TypeMismatchError(EntityPolicyError):
    """A field is present but has the wrong shape."""


class EmptyValueError(EntityPolicyError):
    """A string field is present but empty."""


_ERROR_CLASSES: dict[ViolationCategory, type[EntityPolicyError]] = {
    ViolationCategory.INVALID_API_VERSION: InvalidApiVersionError,
    ViolationCategory.INVALID_KIND: InvalidKindError,
    ViolationCategory.MISSING_FIELD: MissingFieldError,
    ViolationCategory.TYPE_MISMATCH: TypeMismatchError,
    ViolationCategory.EMPTY_VALUE: EmptyValueError,
}
