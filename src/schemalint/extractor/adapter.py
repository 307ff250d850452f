"""Extractor contract and the snapshot-file implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence

from schemalint.common import ExtractionError, Schema, UserInputError
from schemalint.extractor.snapshot import load_snapshot
from schemalint.rules.loader import load_object

logger = logging.getLogger(__name__)


class SchemaExtractor(Protocol):
    """Produces schema snapshots for the requested schema names."""

    async def extract_schemas(
        self, connection: Mapping[str, Any], schemas: Sequence[str]
    ) -> dict[str, Schema]:
        ...


class SnapshotFileExtractor:
    """Reads schemas from the YAML/JSON file named by ``connection["snapshot"]``."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir

    async def extract_schemas(
        self, connection: Mapping[str, Any], schemas: Sequence[str]
    ) -> dict[str, Schema]:
        snapshot_ref = connection.get("snapshot")
        if not snapshot_ref:
            raise UserInputError("connection.snapshot is required for the snapshot extractor")

        path = Path(str(snapshot_ref))
        if not path.is_absolute() and self._base_dir is not None:
            path = self._base_dir / path

        logger.info("reading snapshot %s", path)
        available = load_snapshot(path)

        missing = [name for name in schemas if name not in available]
        if missing:
            raise ExtractionError(f"Schemas not found in snapshot {path}: {', '.join(missing)}")

        return {name: available[name] for name in schemas}


def get_extractor(connection: Mapping[str, Any], base_dir: Path | None = None) -> SchemaExtractor:
    """Picks the extractor for a connection descriptor.

    ``connection["extractor"]`` names a ``module:attribute`` factory or
    instance; otherwise ``connection["snapshot"]`` selects the file extractor.
    """

    custom = connection.get("extractor")
    if custom:
        target = load_object(str(custom), base_dir)
        if hasattr(target, "extract_schemas") and not isinstance(target, type):
            extractor = target
        elif callable(target):
            extractor = target()
        else:
            extractor = target
        if not hasattr(extractor, "extract_schemas"):
            raise UserInputError(f"{custom!r} does not provide extract_schemas()")
        return extractor

    if connection.get("snapshot"):
        return SnapshotFileExtractor(base_dir=base_dir)

    raise UserInputError("connection must define either 'snapshot' or 'extractor'")
