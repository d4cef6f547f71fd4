"""Entry point for validating catalog entity files."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from .config.loader import load_config
from .models.base import DEFAULT_NAMESPACE
from .policies import EntityPolicy, default_policy
from .validation import EntityPolicyError

logger = logging.getLogger(__name__)

USAGE = "usage: catalog-model-validate FILE [FILE ...]"


def entity_label(entity: dict[str, Any]) -> str:
    """Format kind:namespace/name for an accepted entity."""
    metadata = entity["metadata"]
    namespace = metadata.get("namespace", DEFAULT_NAMESPACE)
    return f"{entity['kind']}:{namespace}/{metadata['name']}"


async def validate_file(path: Path, policy: EntityPolicy) -> int:
    """Validate every YAML document in a file.

    Returns:
        Number of rejected documents, or 1 if the file could not be read.
    """
    try:
        with open(path, encoding="utf-8") as f:
            documents = [doc for doc in yaml.safe_load_all(f) if doc is not None]
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        print(f"ERROR {path}: {e}")
        return 1

    failures = 0
    for index, document in enumerate(documents):
        location = f"{path}#{index}"
        try:
            await policy.enforce(document)
        except EntityPolicyError as e:
            failures += 1
            print(f"FAIL  {location}: [{e.category.value}] {e}")
            continue
        print(f"OK    {location}: {entity_label(document)}")

    logger.debug(f"Checked {len(documents)} document(s) in {path}")
    return failures


async def validate_paths(paths: list[Path], policy: EntityPolicy) -> int:
    """Validate files in order and return the total number of failures."""
    failures = 0
    for path in paths:
        failures += await validate_file(path, policy)
    return failures


def main(argv: list[str] | None = None) -> int:
    """Run validation over the files named on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE)
        return 2

    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.settings.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    policy = default_policy(config)
    failures = asyncio.run(validate_paths([Path(arg) for arg in args], policy))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
