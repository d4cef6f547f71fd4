"""Base models for catalog entities."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_NAMESPACE = "default"


class EntityKind(str, Enum):
    """Entity kinds with a validation policy."""

    USER = "User"
    GROUP = "Group"


class EntityMetadata(BaseModel):
    """Common metadata for all entities."""

    name: str = Field(..., title="Name", description="Unique entity name")
    namespace: str = Field(default=DEFAULT_NAMESPACE, title="Namespace")
    title: str | None = Field(
        default=None, title="Title", description="Human-readable title"
    )
    description: str | None = Field(default=None, title="Description")
    labels: dict[str, str] = Field(default_factory=dict, title="Labels")
    annotations: dict[str, str] = Field(default_factory=dict, title="Annotations")
    tags: list[str] = Field(default_factory=list, title="Tags")


class EntityProfile(BaseModel):
    """Profile information shared by users and groups."""

    displayName: str | None = None
    email: str | None = None
    picture: str | None = None


class BaseEntity(BaseModel):
    """Base class for all typed catalog entities.

    Instances are only built from documents that already passed the kind's
    policy, see ``KindEntityPolicy.parse``.
    """

    apiVersion: str
    kind: EntityKind
    metadata: EntityMetadata

    @property
    def entity_id(self) -> str:
        """Get unique entity ID (kind:namespace/name)."""
        return f"{self.kind.value}:{self.metadata.namespace}/{self.metadata.name}"
