from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from servicebinding.errors.errors import ConfigurationError

"""
Discovery configuration, resolved from the environment or a TOML file
(see config_loader.py).
"""

ENV_ROOT: str = "SERVICE_BINDING_ROOT"
ENV_CACHE: str = "SERVICE_BINDING_CACHE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


class DiscoveryConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Optional[Path] = None  # service binding root; None disables discovery
    cache: bool = False  # wrap discovered bindings in CacheBinding

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> DiscoveryConfig:
        env = os.environ if environ is None else environ

        raw_root = env.get(ENV_ROOT)
        root = Path(raw_root) if raw_root else None

        raw_cache = env.get(ENV_CACHE, "").strip().lower()
        if raw_cache in _TRUE_VALUES:
            cache = True
        elif raw_cache in _FALSE_VALUES:
            cache = False
        else:
            raise ConfigurationError(
                f"{ENV_CACHE} must be a boolean",
                field="cache",
                value=env.get(ENV_CACHE),
            )

        return cls(root=root, cache=cache)
