"""Policy composition and dispatch by entity kind."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..validation import ValidationFailure, ViolationCategory
from ..validation.validators import lookup
from .common import CommonEntityPolicy
from .group import GroupEntityV1alpha1Policy
from .kind import KindEntityPolicy
from .types import EntityPolicy, document_failure
from .user import UserEntityV1alpha1Policy

if TYPE_CHECKING:
    from ..config.models import CatalogModelConfig

logger = logging.getLogger(__name__)

DEFAULT_KIND_POLICIES: tuple[type[KindEntityPolicy], ...] = (
    UserEntityV1alpha1Policy,
    GroupEntityV1alpha1Policy,
)


class AllOfPolicy(EntityPolicy):
    """Runs several policies in order; the first rejection wins."""

    def __init__(self, policies: Iterable[EntityPolicy]):
        self._policies = tuple(policies)

    @property
    def policies(self) -> tuple[EntityPolicy, ...]:
        return self._policies

    async def enforce(self, entity: Any) -> Any:
        for policy in self._policies:
            await policy.enforce(entity)
        return entity


def all_of(*policies: EntityPolicy) -> AllOfPolicy:
    """Combine policies so that an entity must pass all of them."""
    return AllOfPolicy(policies)


class KindPolicyRegistry(EntityPolicy):
    """Maps entity kinds to their policies and enforces the matching one."""

    def __init__(self) -> None:
        self._policies: dict[str, EntityPolicy] = {}

    def register(self, kind: str, policy: EntityPolicy) -> None:
        """Register (or replace) the policy for a kind."""
        if kind in self._policies:
            logger.debug(f"Replacing policy for kind {kind}")
        self._policies[kind] = policy

    def unregister(self, kind: str) -> bool:
        """Remove the policy for a kind. Returns False if none was registered."""
        return self._policies.pop(kind, None) is not None

    def get(self, kind: str) -> EntityPolicy | None:
        """Get the policy for a kind."""
        return self._policies.get(kind)

    def kinds(self) -> list[str]:
        """Get registered kind names."""
        return list(self._policies.keys())

    async def enforce(self, entity: Any) -> Any:
        failure = document_failure(entity)
        if failure is not None:
            raise failure.to_error()

        kind = lookup(entity, "kind")
        policy = self._policies.get(kind) if isinstance(kind, str) else None
        if policy is None:
            raise ValidationFailure(
                path="kind",
                category=ViolationCategory.INVALID_KIND,
                message=(
                    f"No policy for kind {kind!r}, "
                    f"expected one of {sorted(self._policies)}"
                ),
            ).to_error()
        return await policy.enforce(entity)


def default_registry(
    extra_api_versions: Mapping[str, Iterable[str]] | None = None,
) -> KindPolicyRegistry:
    """Create a registry with the built-in kind policies.

    Args:
        extra_api_versions: Additional dialects to accept, keyed by kind.
    """
    extra_api_versions = extra_api_versions or {}
    registry = KindPolicyRegistry()
    for policy_class in DEFAULT_KIND_POLICIES:
        extra = extra_api_versions.get(policy_class.KIND, ())
        registry.register(policy_class.KIND, policy_class(extra))
    return registry


def registry_from_config(config: CatalogModelConfig) -> KindPolicyRegistry:
    """Create the default registry with dialects added by configuration."""
    return default_registry(config.settings.api_versions)


def default_policy(config: CatalogModelConfig | None = None) -> AllOfPolicy:
    """Envelope checks followed by the kind-specific policy."""
    if config is None:
        return all_of(CommonEntityPolicy(), default_registry())
    return all_of(CommonEntityPolicy(), registry_from_config(config))
