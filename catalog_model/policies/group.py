"""Policy for Group entities."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import Group
from ..models.base import EntityKind
from ..validation import (
    Validator,
    array_of,
    object_shape,
    optional,
    require_non_empty_string,
)
from .kind import KindEntityPolicy
from .user import PROFILE_FIELDS


class GroupEntityV1alpha1Policy(KindEntityPolicy):
    """Validates the shape of Group entities.

    Accepts the same dialects as ``UserEntityV1alpha1Policy``.
    """

    KIND = EntityKind.GROUP.value
    API_VERSIONS = ("backstage.io/v1alpha1", "backstage.io/v1beta1", "v1")
    MODEL = Group

    @classmethod
    def spec_fields(cls) -> Mapping[str, Validator]:
        return {
            "type": require_non_empty_string,
            "profile": optional(object_shape(PROFILE_FIELDS)),
            "parent": optional(require_non_empty_string),
            "ancestors": array_of(require_non_empty_string),
            "children": array_of(require_non_empty_string),
            "descendants": array_of(require_non_empty_string),
        }
