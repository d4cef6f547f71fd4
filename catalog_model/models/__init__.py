"""Pydantic models for validated catalog entities."""

from .base import BaseEntity, EntityKind, EntityMetadata, EntityProfile
from .group import Group, GroupProfile, GroupSpec
from .user import User, UserProfile, UserSpec

__all__ = [
    "BaseEntity",
    "EntityKind",
    "EntityMetadata",
    "EntityProfile",
    "Group",
    "GroupProfile",
    "GroupSpec",
    "User",
    "UserProfile",
    "UserSpec",
]
