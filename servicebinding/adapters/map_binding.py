from __future__ import annotations

from typing import Mapping, Optional

from servicebinding.core.secret import is_valid_secret_key
from servicebinding.ports.binding import Binding


class MapBinding(Binding):
    """
    Binding whose entries come from an in-memory mapping.
    The mapping is kept by reference and never modified.
    """

    def __init__(self, name: str, content: Mapping[str, bytes]) -> None:
        self._name = name
        self._content = content

    def get_as_bytes(self, key: str) -> Optional[bytes]:
        if not is_valid_secret_key(key):
            return None

        return self._content.get(key)

    def get_name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"MapBinding(name={self._name!r})"
