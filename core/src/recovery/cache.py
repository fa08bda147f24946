"""LRU-кэш с TTL для резервных данных."""

from collections import OrderedDict
from dataclasses import dataclass
from time import monotonic
from typing import Any


@dataclass(slots=True)
class _CacheEntry:
    data: Any
    expires_at: float
    hits: int = 1


class FallbackCache:
    """Хранит последние успешные результаты для graceful degradation."""

    def __init__(
        self, max_size: int = 1000, default_ttl: float = 300.0
    ) -> None:
        if max_size < 1:
            msg = "max_size must be positive"
            raise ValueError(msg)

        self.max_size = max_size
        self.default_ttl = default_ttl
        self._entries: OrderedDict[str, _CacheEntry] = OrderedDict()

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return default

        if monotonic() > entry.expires_at:
            self.delete(key)
            return default

        entry.hits += 1
        self._entries.move_to_end(key)
        return entry.data

    def set(self, key: str, data: Any, ttl: float | None = None) -> None:
        if key not in self._entries and len(self._entries) >= self.max_size:
            self._entries.popitem(last=False)

        self._entries[key] = _CacheEntry(
            data=data,
            expires_at=monotonic()
            + (ttl if ttl is not None else self.default_ttl),
        )
        self._entries.move_to_end(key)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def get_stats(self) -> dict[str, float]:
        """Размер кэша и среднее число обращений на запись."""
        size = len(self._entries)
        total_hits = sum(entry.hits for entry in self._entries.values())
        return {
            "size": size,
            "max_size": self.max_size,
            "hit_rate": total_hits / size if size else 0.0,
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
