from __future__ import annotations

import logging
from typing import Optional

from servicebinding.ports.binding import Binding

logger = logging.getLogger(__name__)


class CacheBinding(Binding):
    """
    Wraps another Binding and keeps every value once it has been retrieved.

    Absent values are not cached, so a missing entry is looked up again on the
    next call. The cache is never evicted. There is no locking: two threads
    missing the same key may both query the delegate.
    """

    def __init__(self, delegate: Binding) -> None:
        self._delegate = delegate
        self._cache: dict[str, bytes] = {}

    @property
    def delegate(self) -> Binding:
        return self._delegate

    def get_as_bytes(self, key: str) -> Optional[bytes]:
        if key in self._cache:
            logger.debug(
                "binding_cache_hit",
                extra={"event": "binding_cache_hit", "key": key},
            )
            return self._cache[key]

        value = self._delegate.get_as_bytes(key)
        if value is not None:
            self._cache[key] = value
        return value

    def get_name(self) -> str:
        # not cached; the delegate decides
        return self._delegate.get_name()

    def __repr__(self) -> str:
        return f"CacheBinding(delegate={self._delegate!r})"
