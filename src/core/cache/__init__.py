"""Cache implementation."""

from src.core.cache.bounded_cache import BoundedOrderedCache
from src.core.cache.collection import Collection

__all__ = [
    "BoundedOrderedCache",
    "Collection"
]
