"""Entity validation policies."""

from .common import CommonEntityPolicy
from .group import GroupEntityV1alpha1Policy
from .kind import KindEntityPolicy
from .registry import (
    AllOfPolicy,
    KindPolicyRegistry,
    all_of,
    default_policy,
    default_registry,
    registry_from_config,
)
from .types import EntityPolicy
from .user import UserEntityV1alpha1Policy

__all__ = [
    "AllOfPolicy",
    "CommonEntityPolicy",
    "EntityPolicy",
    "GroupEntityV1alpha1Policy",
    "KindEntityPolicy",
    "KindPolicyRegistry",
    "UserEntityV1alpha1Policy",
    "all_of",
    "default_policy",
    "default_registry",
    "registry_from_config",
]
