"""Serialize HackerTracker collections and write them to disk."""
import dataclasses
import json
import logging
import os
from typing import Any, List, Sequence, Tuple

from processor.errors import FilesystemError, SerializationError
from processor.models import HackerTrackerDocuments

logger = logging.getLogger(__name__)


def emit_document(collection_name: str, records: Sequence[Any]) -> bytes:
    """
    Wrap records in a single-keyed envelope and serialize it.

    Args:
        collection_name: Top-level key, e.g. ``schedule``
        records: Dataclass instances or plain mappings

    Returns:
        UTF-8 encoded JSON document

    Raises:
        SerializationError: If any record cannot be serialized
    """
    items = [
        dataclasses.asdict(record) if dataclasses.is_dataclass(record) else record
        for record in records
    ]

    try:
        payload = json.dumps({collection_name: items}, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Unable to serialize {collection_name}: {e}") from e

    return payload.encode('utf-8')


class HackerTrackerWriter:
    """Writes the four HackerTracker documents into a directory."""

    def __init__(self, save_dir: str = '.'):
        """
        Initialize the writer.

        Args:
            save_dir: Output directory, created on demand
        """
        self.save_dir = save_dir

    def ensure_directory(self) -> None:
        """Create the output directory if it does not exist."""
        try:
            os.makedirs(self.save_dir, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Unable to create {self.save_dir}: {e}") from e

    def write_document(self, filename: str, data: bytes) -> str:
        """
        Write one serialized document.

        Args:
            filename: File name inside the output directory
            data: Serialized document

        Returns:
            Path of the written file

        Raises:
            FilesystemError: If the file cannot be written
        """
        path = os.path.join(self.save_dir, filename)
        try:
            with open(path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise FilesystemError(f"Unable to write {path}: {e}") from e

        logger.info(f"Wrote {len(data)} bytes to {path}")
        return path

    def write_all(self, documents: HackerTrackerDocuments) -> List[str]:
        """
        Serialize and write every collection.

        All four documents are serialized before any file is touched.

        Args:
            documents: Converted collections

        Returns:
            Paths of the written files, in write order
        """
        outputs: List[Tuple[str, bytes]] = [
            ('event_types.json', emit_document('event_types', documents.event_types)),
            ('locations.json', emit_document('locations', documents.locations)),
            ('speakers.json', emit_document('speakers', documents.speakers)),
            # events.json uses the "schedule" key
            ('events.json', emit_document('schedule', documents.events)),
        ]

        self.ensure_directory()
        return [self.write_document(filename, data) for filename, data in outputs]
