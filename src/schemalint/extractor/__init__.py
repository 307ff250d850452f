"""Schema extraction layer."""

from .adapter import SchemaExtractor, SnapshotFileExtractor, get_extractor
from .snapshot import load_snapshot, schema_from_dict, write_snapshot

__all__ = [
    "SchemaExtractor",
    "SnapshotFileExtractor",
    "get_extractor",
    "load_snapshot",
    "schema_from_dict",
    "write_snapshot",
]
