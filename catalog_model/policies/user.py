"""Policy for User entities."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import User
from ..models.base import EntityKind
from ..validation import (
    Validator,
    array_of,
    object_shape,
    optional,
    require_non_empty_string,
)
from .kind import KindEntityPolicy

PROFILE_FIELDS: dict[str, Validator] = {
    "displayName": optional(require_non_empty_string),
    "email": optional(require_non_empty_string),
    "picture": optional(require_non_empty_string),
}


class UserEntityV1alpha1Policy(KindEntityPolicy):
    """Validates the shape of User entities.

    backstage.io/v1beta1 documents are accepted as well, they share the same
    spec. The bare "v1" dialect is accepted for short-form documents; the
    group-qualified "backstage.io/v1" and bare "v1alpha1"/"v1beta1" are not.
    """

    KIND = EntityKind.USER.value
    API_VERSIONS = ("backstage.io/v1alpha1", "backstage.io/v1beta1", "v1")
    MODEL = User

    @classmethod
    def spec_fields(cls) -> Mapping[str, Validator]:
        return {
            "type": require_non_empty_string,
            "profile": optional(object_shape(PROFILE_FIELDS)),
            "memberOf": array_of(require_non_empty_string),
            "directMemberOf": array_of(require_non_empty_string),
        }
