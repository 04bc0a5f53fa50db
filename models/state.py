"""Application state owned by the sync controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from models.records import ALL, CityRecord, Selection


class SyncStatus(str, Enum):
    """Lifecycle of the local record collection."""

    idle = "idle"
    loading = "loading"
    ready = "ready"
    failed = "failed"


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot; transitions produce a new instance via ``replace``."""

    records: Tuple[CityRecord, ...] = ()
    selection: Selection = ALL
    threshold: str = ""
    status: SyncStatus = SyncStatus.idle
    error: Optional[str] = None
    create_error: Optional[str] = None
