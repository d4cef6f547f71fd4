"""Group entity model."""

from typing import Literal

from pydantic import BaseModel, Field

from .base import BaseEntity, EntityKind, EntityProfile


class GroupProfile(EntityProfile):
    """Group profile information."""


class GroupSpec(BaseModel):
    """Spec for Group entity."""

    type: str = Field(
        ..., title="Type", description="Group type (team, business-unit, etc)"
    )
    profile: GroupProfile | None = None
    parent: str | None = Field(default=None, title="Parent")
    ancestors: list[str] = Field(..., title="Ancestors")
    children: list[str] = Field(..., title="Children")
    descendants: list[str] = Field(..., title="Descendants")


class Group(BaseEntity):
    """Team/group entity."""

    kind: Literal[EntityKind.GROUP] = EntityKind.GROUP
    spec: GroupSpec
