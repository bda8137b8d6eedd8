"""
Kubernetes Secret key validation.

See https://kubernetes.io/docs/concepts/configuration/secret/#overview-of-secrets
"""

import re
from typing import Final

_VALID_SECRET_KEY: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9\-_.]+")


def is_valid_secret_key(key: str) -> bool:
    """True if `key` consists only of ASCII letters, digits, '-', '_' and '.'."""
    return _VALID_SECRET_KEY.fullmatch(key) is not None
