"""Base class for kind-specific entity policies."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from ..models.base import BaseEntity
from ..validation import (
    MISSING,
    ValidationFailure,
    Validator,
    ViolationCategory,
    object_shape,
)
from ..validation.validators import lookup
from .types import EntityPolicy, document_failure

logger = logging.getLogger(__name__)

class KindEntityPolicy(EntityPolicy):
    """Policy for a single entity kind.

    Subclasses declare ``KIND``, the accepted ``API_VERSIONS``, the ordered
    ``spec`` field validators and the pydantic ``MODEL`` built by ``parse``.
    Checks run in a fixed order and stop at the first failure:

    1. the document must be an object
    2. ``apiVersion`` must be accepted for the kind
    3. ``kind`` must equal ``KIND``
    4. ``spec`` must be an object and each declared field must pass
    """

    KIND: ClassVar[str]
    API_VERSIONS: ClassVar[tuple[str, ...]]
    MODEL: ClassVar[type[BaseEntity]]

    def __init__(self, extra_api_versions: Iterable[str] = ()):
        """Initialize policy.

        Args:
            extra_api_versions: Dialects accepted in addition to API_VERSIONS.
        """
        self._api_versions = frozenset((*self.API_VERSIONS, *extra_api_versions))
        self._spec_validator = object_shape(self.spec_fields())

    @classmethod
    @abstractmethod
    def spec_fields(cls) -> Mapping[str, Validator]:
        """Validators for ``spec``, checked in declaration order."""
        ...

    @property
    def kind(self) -> str:
        return self.KIND

    @property
    def api_versions(self) -> frozenset[str]:
        return self._api_versions

    def check(self, entity: Any) -> ValidationFailure | None:
        """Run the pipeline and return the first failure, if any."""
        failure = document_failure(entity)
        if failure is not None:
            return failure

        failure = self._check_api_version(lookup(entity, "apiVersion"))
        if failure is not None:
            return failure

        failure = self._check_kind(lookup(entity, "kind"))
        if failure is not None:
            return failure

        return self._spec_validator(lookup(entity, "spec"), "spec")

    async def enforce(self, entity: Any) -> Any:
        failure = self.check(entity)
        if failure is not None:
            logger.debug(f"Rejected {self.KIND} entity: {failure.message}")
            raise failure.to_error()
        return entity

    async def parse(self, entity: Any) -> BaseEntity:
        """Enforce the policy, then build the typed model for the entity."""
        await self.enforce(entity)
        return self.MODEL.model_validate(entity)

    def _check_api_version(self, value: Any) -> ValidationFailure | None:
        if isinstance(value, str) and value in self._api_versions:
            return None
        if value is MISSING:
            problem = f"Missing apiVersion for kind {self.KIND}"
        else:
            problem = f"Unsupported apiVersion {value!r} for kind {self.KIND}"
        return ValidationFailure(
            path="apiVersion",
            category=ViolationCategory.INVALID_API_VERSION,
            message=f"{problem}, expected one of {sorted(self._api_versions)}",
        )

    def _check_kind(self, value: Any) -> ValidationFailure | None:
        if isinstance(value, str) and value == self.KIND:
            return None
        found = "missing kind" if value is MISSING else f"kind {value!r}"
        return ValidationFailure(
            path="kind",
            category=ViolationCategory.INVALID_KIND,
            message=f"Unexpected {found}, expected {self.KIND!r}",
        )
