"""Loading of backup metadata descriptors."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .models import BackupRecord
from ..errors import MetadataError
from ..utils.formatters import parse_rfc3339


FIELD_NAME = 'nome'
FIELD_SIZE = 'tamanho_bytes'
FIELD_CREATED = 'data_criacao'
FIELD_MODIFIED = 'ultima_modificacao'

REQUIRED_FIELDS = [FIELD_NAME, FIELD_SIZE, FIELD_CREATED, FIELD_MODIFIED]


class MetadataLoader:
    """Reads backup records from a JSON descriptor."""

    def __init__(self, path: Union[str, Path]):
        """Initialize metadata loader.

        Args:
            path: Path to the JSON document holding the record array.
        """
        self.path = Path(path)
        self.logger = logging.getLogger(__name__)

    def load(self) -> List[BackupRecord]:
        """Load all records from the descriptor.

        Returns:
            Records in document order.

        Raises:
            MetadataError: If the file is unreadable or malformed.
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise MetadataError(f"Invalid JSON in metadata file {self.path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise MetadataError(f"Error reading metadata file {self.path}: {e}")

        records = parse_records(data)
        self.logger.info(f"Loaded {len(records)} backup records from {self.path}")
        return records


def parse_records(data: Any) -> List[BackupRecord]:
    """Convert a decoded JSON document into backup records.

    Raises:
        MetadataError: If the document is not an array of valid records.
    """
    if data is None:
        return []

    if not isinstance(data, list):
        raise MetadataError(f"Metadata must be a JSON array, got {type(data).__name__}")

    return [parse_record(item, index) for index, item in enumerate(data)]


def parse_record(item: Dict[str, Any], index: int = 0) -> BackupRecord:
    if not isinstance(item, dict):
        raise MetadataError(f"Record {index} must be an object")

    missing_fields = [field for field in REQUIRED_FIELDS if field not in item]
    if missing_fields:
        raise MetadataError(f"Record {index} missing required fields: {missing_fields}")

    name = item[FIELD_NAME]
    if not isinstance(name, str) or not name:
        raise MetadataError(f"Record {index} has an empty or non-string name")

    size = item[FIELD_SIZE]
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise MetadataError(f"Record {index} ({name}) has invalid size: {size!r}")

    try:
        created_at = parse_rfc3339(item[FIELD_CREATED])
        modified_at = parse_rfc3339(item[FIELD_MODIFIED])
    except ValueError as e:
        raise MetadataError(f"Record {index} ({name}) has invalid timestamp: {e}")

    return BackupRecord(
        name=name,
        size_bytes=size,
        created_at=created_at,
        modified_at=modified_at
    )
