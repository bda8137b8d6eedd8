"""
Typed accessors layered on top of any Binding.
"""

from __future__ import annotations

import re
from typing import Final, Optional

from servicebinding.errors.errors import MissingTypeError
from servicebinding.ports.binding import Binding

# The key for the provider of a binding.
PROVIDER: Final[str] = "provider"

# The key for the type of a binding.
TYPE: Final[str] = "type"

# whitespace plus a stray byte order mark at either end
_SURROUNDING_BLANKS: Final[re.Pattern[str]] = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def get(binding: Binding, key: str) -> Optional[str]:
    """
    Return the entry `key` as UTF-8 text with surrounding whitespace stripped,
    or None if the entry does not exist. Invalid UTF-8 sequences decode to
    U+FFFD instead of raising.
    """
    value = binding.get_as_bytes(key)
    if value is None:
        return None
    text = value.decode("utf-8", errors="replace")
    return _SURROUNDING_BLANKS.sub("", text)


def get_provider(binding: Binding) -> Optional[str]:
    """Return the value of the PROVIDER entry, or None if not present."""
    return get(binding, PROVIDER)


def get_type(binding: Binding) -> str:
    """
    Return the value of the TYPE entry.
    Raises MissingTypeError if the binding does not declare a type.
    """
    t = get(binding, TYPE)
    if t is None:
        raise MissingTypeError(binding.get_name())
    return t
