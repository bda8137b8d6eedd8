"""
Binding backed by a volume mounted Kubernetes Secret (a "config tree").

Each regular file directly under the root is one entry: the file name is the
key and the raw file contents are the value. Nothing is held in memory; every
lookup goes back to the filesystem.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Union

from servicebinding.core.secret import is_valid_secret_key
from servicebinding.ports.binding import Binding

logger = logging.getLogger(__name__)


class ConfigTreeBinding(Binding):
    def __init__(self, root: Union[str, os.PathLike[str]]) -> None:
        self._root = root

    @property
    def root(self) -> Union[str, os.PathLike[str]]:
        return self._root

    def get_as_bytes(self, key: str) -> Optional[bytes]:
        """
        Read the entry `key` from disk.

        Returns None for invalid keys (without touching the filesystem), for
        missing entries and for entries that are not regular files. Any other
        OSError is raised to the caller.
        """
        if not is_valid_secret_key(key):
            return None

        path = Path(self._root) / key
        try:
            st = path.stat()
        except FileNotFoundError:
            return None

        if not stat.S_ISREG(st.st_mode):
            logger.debug(
                "binding_entry_not_a_file",
                extra={"event": "binding_entry_not_a_file", "binding": self.get_name(), "key": key},
            )
            return None

        return path.read_bytes()

    def get_name(self) -> str:
        return Path(self._root).name

    def __repr__(self) -> str:
        return f"ConfigTreeBinding(root={os.fspath(self._root)!r})"
