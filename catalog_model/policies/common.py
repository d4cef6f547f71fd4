"""Kind-independent checks on the root fields of an entity."""

from __future__ import annotations

import logging
from typing import Any

from ..validation import (
    array_of,
    mapping_of,
    object_shape,
    optional,
    require_non_empty_string,
    require_string,
)
from .types import EntityPolicy, document_failure

logger = logging.getLogger(__name__)

METADATA_FIELDS = {
    "name": require_non_empty_string,
    "namespace": optional(require_non_empty_string),
    "title": optional(require_string),
    "description": optional(require_string),
    "labels": optional(mapping_of(require_string)),
    "annotations": optional(mapping_of(require_string)),
    "tags": optional(array_of(require_non_empty_string)),
}

# "spec" is left to the kind policies, only its shape is checked here.
ROOT_FIELDS = {
    "apiVersion": require_non_empty_string,
    "kind": require_non_empty_string,
    "metadata": object_shape(METADATA_FIELDS),
    "spec": optional(object_shape({})),
}


class CommonEntityPolicy(EntityPolicy):
    """Checks the envelope every entity shares, whatever its kind."""

    def __init__(self) -> None:
        self._validator = object_shape(ROOT_FIELDS)

    async def enforce(self, entity: Any) -> Any:
        failure = document_failure(entity) or self._validator(entity, "")
        if failure is not None:
            logger.debug(f"Rejected entity envelope: {failure.message}")
            raise failure.to_error()
        return entity
