"""Audit log rendering for backup record sets."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..core.models import BackupRecord
from ..errors import AuditLogError
from ..utils.formatters import format_rfc3339


# Consumers of the existing log files parse this layout
LINE_FORMAT = "Nome: {name} | Tamanho: {size} bytes | Criado: {created} | Última modificação: {modified}\n"


def render_line(record: BackupRecord) -> str:
    """Render one record as a single log line, newline included."""
    return LINE_FORMAT.format(
        name=record.name,
        size=record.size_bytes,
        created=format_rfc3339(record.created_at),
        modified=format_rfc3339(record.modified_at)
    )


def render(records: Iterable[BackupRecord]) -> str:
    return ''.join(render_line(record) for record in records)


class AuditLogger:
    """Writes record sets to audit log files."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def write_log(self, records: Iterable[BackupRecord], destination: Union[str, Path]) -> None:
        """Overwrite destination with one line per record.

        Characters UTF-8 cannot encode, such as lone surrogates from the
        metadata, are written as '?'.

        Args:
            records: Records to write, in output order.
            destination: Log file path.

        Raises:
            AuditLogError: On the first open or write failure. The file may be
                left partially written.
        """
        destination = Path(destination)
        lines: List[str] = [render_line(record) for record in records]

        try:
            with open(destination, 'w', encoding='utf-8', errors='replace', newline='\n') as f:
                for line in lines:
                    f.write(line)
        except (OSError, ValueError) as e:
            raise AuditLogError(destination, e) from e

        self.logger.info(f"Audit log written: {destination} ({len(lines)} records)")
