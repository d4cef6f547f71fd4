"""User entity model."""

from typing import Literal

from pydantic import BaseModel, Field

from .base import BaseEntity, EntityKind, EntityProfile


class UserProfile(EntityProfile):
    """User profile information."""


class UserSpec(BaseModel):
    """Spec for User entity."""

    type: str = Field(..., title="Type", description="User type (employee, etc)")
    profile: UserProfile | None = None
    memberOf: list[str] = Field(..., title="Member Of")
    directMemberOf: list[str] = Field(..., title="Direct Member Of")


class User(BaseEntity):
    """User entity."""

    kind: Literal[EntityKind.USER] = EntityKind.USER
    spec: UserSpec
