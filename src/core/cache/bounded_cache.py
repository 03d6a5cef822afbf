import logging

from typing import Any, Hashable, Iterator, Optional

from src.core.cache.collection import Collection

class BoundedOrderedCache:
    """Insertion-ordered cache with oldest-first eviction

    max_size semantics:
        0         -> caching disabled, set() never stores anything
        > 0       -> at most max_size entries are kept
        < 0, None -> unbounded
    """

    def __init__(self, max_size: Optional[int] = None):
        """Initialize the cache

        Args:
            max_size: Maximum number of entries
        """
        self._entries = Collection()
        self._max_size = max_size

    @property
    def max_size(self) -> Optional[int]:
        return self._max_size

    @max_size.setter
    def max_size(self, value: Optional[int]) -> None:
        """Change the capacity, trimming the oldest entries if needed"""
        self._max_size = value

        if self.disabled:
            self._entries.clear()
        elif self.bounded:
            while len(self._entries) > value:
                self._evict_oldest()

    @property
    def disabled(self) -> bool:
        return self._max_size == 0

    @property
    def bounded(self) -> bool:
        return self._max_size is not None and self._max_size > 0

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: Hashable, value: Any) -> None:
        """Insert or update an entry

        An existing key is updated in place. A new key evicts the oldest
        entries until there is room for it.

        Args:
            key: Entry key
            value: Entry value
        """
        if self.disabled:
            return

        if key not in self._entries and self.bounded:
            while len(self._entries) >= self._max_size:
                self._evict_oldest()

        self._entries.set(key, value)

    def delete(self, key: Hashable) -> bool:
        return self._entries.delete(key)

    def first_key(self) -> Optional[Hashable]:
        return self._entries.first_key()

    def clear(self) -> None:
        self._entries.clear()

    @property
    def size(self) -> int:
        return len(self._entries)

    def keys(self):
        return self._entries.keys()

    def values(self):
        return self._entries.values()

    def items(self):
        return self._entries.items()

    def _evict_oldest(self) -> None:
        oldest = self._entries.first_key()
        self._entries.delete(oldest)
        logging.debug(f"Evicted {oldest} from cache (max size {self._max_size})")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"BoundedOrderedCache(max_size={self._max_size}, size={len(self._entries)})"
