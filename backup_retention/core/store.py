"""File store and clock capabilities used by the retention pipeline."""

import os
import shutil
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, Optional, Union


class FileStore(ABC):
    """Source and destination stores addressed by artifact name.

    ``remove`` returns False when the artifact is already absent. Any other
    failure raises ``OSError``, or ``ValueError`` for names the filesystem
    cannot represent (embedded NUL, unencodable characters). ``copy`` raises
    the same exceptions when the artifact cannot be duplicated.
    """

    @abstractmethod
    def ensure_locations(self) -> None:
        """Create the source and destination locations if absent."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return True when the artifact is present in the source store."""

    @abstractmethod
    def remove(self, name: str) -> bool:
        """Remove the artifact from the source store."""

    @abstractmethod
    def copy(self, name: str) -> None:
        """Duplicate the artifact from the source to the destination store."""


class LocalFileStore(FileStore):
    """File store backed by two local directories."""

    def __init__(self, source_dir: Union[str, Path], destination_dir: Union[str, Path]):
        self.source_dir = Path(source_dir)
        self.destination_dir = Path(destination_dir)

    def ensure_locations(self) -> None:
        self.source_dir.mkdir(parents=True, exist_ok=True)
        self.destination_dir.mkdir(parents=True, exist_ok=True)

    def source_path(self, name: str) -> Path:
        return self.source_dir / name

    def destination_path(self, name: str) -> Path:
        return self.destination_dir / name

    def exists(self, name: str) -> bool:
        return self.source_path(name).exists()

    def remove(self, name: str) -> bool:
        try:
            os.remove(self.source_path(name))
        except FileNotFoundError:
            return False
        return True

    def copy(self, name: str) -> None:
        # copyfile opens the source before truncating the destination
        shutil.copyfile(self.source_path(name), self.destination_path(name))


class InMemoryFileStore(FileStore):
    """Dictionary-backed file store for tests and dry runs.

    Names listed in ``fail_remove`` or ``fail_copy`` raise ``PermissionError``
    to simulate items that cannot be processed.
    """

    def __init__(self, source: Optional[Dict[str, bytes]] = None,
                 destination: Optional[Dict[str, bytes]] = None,
                 fail_remove: Iterable[str] = (), fail_copy: Iterable[str] = ()):
        self.source: Dict[str, bytes] = dict(source or {})
        self.destination: Dict[str, bytes] = dict(destination or {})
        self.fail_remove = set(fail_remove)
        self.fail_copy = set(fail_copy)
        self.locations_ready = False

    def ensure_locations(self) -> None:
        self.locations_ready = True

    def exists(self, name: str) -> bool:
        return name in self.source

    def remove(self, name: str) -> bool:
        if name in self.fail_remove:
            raise PermissionError(f"Permission denied: {name}")
        if name not in self.source:
            return False
        del self.source[name]
        return True

    def copy(self, name: str) -> None:
        if name in self.fail_copy:
            raise PermissionError(f"Permission denied: {name}")
        if name not in self.source:
            raise FileNotFoundError(f"No such file: {name}")
        self.destination[name] = self.source[name]


class Clock(ABC):
    """Source of the reference time for retention decisions."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware instant."""


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
