from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, Optional, Tuple

class Collection:
    """Insertion-ordered map of key to value

    Updating an existing key keeps its position, new keys are appended.
    Fetch results are returned as collections, and the bounded cache
    keeps its entries in one.
    """

    def __init__(self, iterable: Optional[Iterable[Tuple[Hashable, Any]]] = None):
        """Initialize the Collection

        Args:
            iterable: Optional (key, value) pairs to populate the collection with
        """
        self._items: Dict[Hashable, Any] = {}

        for key, value in iterable or []:
            self.set(key, value)

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Get a value by key

        Args:
            key: Key to look up
            default: Value returned when the key is absent

        Returns:
            Stored value or default
        """
        return self._items.get(key, default)

    def set(self, key: Hashable, value: Any) -> None:
        """Store a value, keeping the position of an existing key

        Args:
            key: Key to store under
            value: Value to store
        """
        self._items[key] = value

    def delete(self, key: Hashable) -> bool:
        """Remove a key

        Args:
            key: Key to remove

        Returns:
            bool: True if the key was present, False otherwise
        """
        if key not in self._items:
            return False
        del self._items[key]
        return True

    def first_key(self) -> Optional[Hashable]:
        """Oldest surviving key, None when empty"""
        return next(iter(self._items), None)

    def last_key(self) -> Optional[Hashable]:
        """Most recently inserted key, None when empty"""
        return next(reversed(self._items), None)

    def clear(self) -> None:
        self._items.clear()

    @property
    def size(self) -> int:
        return len(self._items)

    def keys(self):
        return self._items.keys()

    def values(self):
        return self._items.values()

    def items(self):
        return self._items.items()

    def filter(self, predicate: Callable[[Any], bool]) -> "Collection":
        """Build a new collection with the values matching predicate, in order

        Args:
            predicate: Function called with each value

        Returns:
            New Collection
        """
        return Collection((key, value) for key, value in self._items.items() if predicate(value))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._items)

    def __getitem__(self, key: Hashable) -> Any:
        return self._items[key]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    def __repr__(self) -> str:
        return f"Collection(size={len(self._items)})"
