"""Entity policy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..validation import ValidationFailure, ViolationCategory
from ..validation.validators import describe_type


class EntityPolicy(ABC):
    """A check applied to a parsed entity document.

    ``enforce`` returns the very same object when the entity is accepted and
    raises ``EntityPolicyError`` when it is rejected. It never mutates its
    argument.
    """

    @abstractmethod
    async def enforce(self, entity: Any) -> Any:
        """Accept the entity (returning it) or raise ``EntityPolicyError``."""
        ...


def document_failure(entity: Any) -> ValidationFailure | None:
    """Reject anything that is not an object at the document root."""
    if isinstance(entity, Mapping):
        return None
    return ValidationFailure(
        path="entity",
        category=ViolationCategory.TYPE_MISMATCH,
        message=f'Field "entity" must be an object, got {describe_type(entity)}',
    )
