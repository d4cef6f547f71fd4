"""Validation policies for catalog entity documents."""

from .policies import (
    EntityPolicy,
    GroupEntityV1alpha1Policy,
    UserEntityV1alpha1Policy,
    default_policy,
)
from .validation import EntityPolicyError

__all__ = [
    "EntityPolicy",
    "EntityPolicyError",
    "GroupEntityV1alpha1Policy",
    "UserEntityV1alpha1Policy",
    "default_policy",
]
