"""Shared fixtures for retention tests."""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List

import pytest

from backup_retention.config.config_manager import RetentionConfig
from backup_retention.core.models import BackupRecord
from backup_retention.core.store import FixedClock


NOW = datetime(2024, 5, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock(now) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def make_record(now) -> Callable[..., BackupRecord]:
    """Build a record created ``age_days`` before the fixed clock."""

    def _make(name: str, age_days: float = 0, size: int = 100) -> BackupRecord:
        created = now - timedelta(days=age_days)
        return BackupRecord(
            name=name,
            size_bytes=size,
            created_at=created,
            modified_at=created + timedelta(minutes=5),
        )

    return _make


def record_to_json(record: BackupRecord) -> dict:
    return {
        "nome": record.name,
        "tamanho_bytes": record.size_bytes,
        "data_criacao": record.created_at.isoformat(),
        "ultima_modificacao": record.modified_at.isoformat(),
    }


@pytest.fixture
def write_metadata(tmp_path) -> Callable[[List[BackupRecord]], Path]:
    def _write(records: List[BackupRecord]) -> Path:
        path = tmp_path / "mock.json"
        path.write_text(json.dumps([record_to_json(r) for r in records]), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def retention_config(tmp_path) -> RetentionConfig:
    return RetentionConfig(
        metadata_file=tmp_path / "mock.json",
        source_dir=tmp_path / "backupsFrom",
        destination_dir=tmp_path / "backupsTo",
        full_log=tmp_path / "backupsFrom.log",
        copied_log=tmp_path / "backupsTo.log",
        retention_days=3,
    )
