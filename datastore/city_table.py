from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from threading import Lock
from typing import List, Optional

from pydantic import TypeAdapter

from app.schemas import CityPayload
from settings import get_settings

_SEED_ADAPTER = TypeAdapter(List[CityPayload])


class CityTable:
    """In-memory city table; records are kept in insertion order."""

    def __init__(self, name: str = "cities", seed_path: Optional[Path] = None) -> None:
        self.name = name
        self.seed_path = seed_path
        self._items: List[CityPayload] = []
        self._lock = Lock()
        if seed_path:
            self._load_seed()

    def put_item(self, item: CityPayload) -> None:
        with self._lock:
            self._items.append(item)

    def scan(self, min_temp: float = 0) -> list[CityPayload]:
        """Return every record whose temperature is at least ``min_temp``."""

        with self._lock:
            return [item for item in self._items if item.temp >= min_temp]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _load_seed(self) -> None:
        if not self.seed_path:
            return
        if not self.seed_path.exists():
            raise FileNotFoundError(f"Seed file {self.seed_path} does not exist.")
        raw = self.seed_path.read_text(encoding="utf-8") or "[]"
        self._items.extend(_SEED_ADAPTER.validate_python(json.loads(raw)))


@lru_cache
def build_default_table(seed_path: Optional[str] = None) -> CityTable:
    settings = get_settings()
    path = settings.seed_path if seed_path is None else seed_path
    return CityTable(seed_path=Path(path) if path else None)
