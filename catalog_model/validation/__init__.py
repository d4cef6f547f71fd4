"""Shape validators and violation types."""

from .errors import (
    EmptyValueError,
    EntityPolicyError,
    InvalidApiVersionError,
    InvalidKindError,
    MissingFieldError,
    TypeMismatchError,
    ValidationFailure,
    ViolationCategory,
)
from .validators import (
    MISSING,
    Validator,
    array_of,
    mapping_of,
    object_shape,
    optional,
    require_non_empty_string,
    require_string,
)

__all__ = [
    "EmptyValueError",
    "EntityPolicyError",
    "InvalidApiVersionError",
    "InvalidKindError",
    "MISSING",
    "MissingFieldError",
    "TypeMismatchError",
    "ValidationFailure",
    "Validator",
    "ViolationCategory",
    "array_of",
    "mapping_of",
    "object_shape",
    "optional",
    "require_non_empty_string",
    "require_string",
]
