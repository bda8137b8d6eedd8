"""
Purpose:
    - Discover bindings projected under a service binding root
    - Look bindings up by name, filter them by type and provider
    - Optionally wrap them so entries are read only once

A service binding root is a directory whose immediate subdirectories are each
one binding (see ConfigTreeBinding). Files directly under the root are ignored.
"""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from typing import Final, Mapping, Optional, Sequence, Union

from servicebinding.adapters.cache_binding import CacheBinding
from servicebinding.adapters.config_tree import ConfigTreeBinding
from servicebinding.config.configs import ENV_ROOT, DiscoveryConfig
from servicebinding.core.binding import get_provider, get_type
from servicebinding.ports.binding import Binding

logger = logging.getLogger(__name__)

SERVICE_BINDING_ROOT: Final[str] = ENV_ROOT


def cached(bindings: Sequence[Binding]) -> list[Binding]:
    """Wrap each binding in a fresh CacheBinding, keeping order."""
    return [CacheBinding(b) for b in bindings]


def from_path(root: Union[str, os.PathLike[str]]) -> list[Binding]:
    """
    Create a ConfigTreeBinding for every directory directly under `root`.

    Returns an empty list if `root` does not exist or is not a directory.
    Order follows the directory listing and is not sorted.
    """
    root_path = os.fspath(root)
    try:
        st = os.stat(root_path)
    except FileNotFoundError:
        logger.debug(
            "binding_root_missing",
            extra={"event": "binding_root_missing", "root": root_path},
        )
        return []

    if not stat.S_ISDIR(st.st_mode):
        logger.debug(
            "binding_root_not_a_directory",
            extra={"event": "binding_root_not_a_directory", "root": root_path},
        )
        return []

    bindings: list[Binding] = []
    for child in os.listdir(root_path):
        child_path = os.path.join(root, child)
        try:
            child_st = os.stat(child_path)
        except FileNotFoundError:
            # removed between listing and stat
            continue

        if stat.S_ISDIR(child_st.st_mode):
            bindings.append(ConfigTreeBinding(child_path))

    logger.debug(
        "bindings_discovered",
        extra={"event": "bindings_discovered", "root": root_path, "count": len(bindings)},
    )
    return bindings


def from_service_binding_root(environ: Optional[Mapping[str, str]] = None) -> list[Binding]:
    """
    Discover bindings under $SERVICE_BINDING_ROOT.

    Returns an empty list, without touching the filesystem, if the variable
    is not set.
    """
    env = os.environ if environ is None else environ
    root = env.get(SERVICE_BINDING_ROOT)
    if root is None:
        logger.debug(
            "binding_root_unset",
            extra={"event": "binding_root_unset", "env_var": SERVICE_BINDING_ROOT},
        )
        return []
    return from_path(root)


def discover(config: Optional[DiscoveryConfig] = None) -> list[Binding]:
    """
    Discover bindings as described by `config` (read from the environment if
    not given), wrapping them in CacheBinding when `config.cache` is set.
    """
    cfg = config if config is not None else DiscoveryConfig.from_env()
    if cfg.root is None:
        return []

    bindings = from_path(cfg.root)
    return cached(bindings) if cfg.cache else bindings


def find(bindings: Sequence[Binding], name: str) -> Optional[Binding]:
    """Return the first binding named `name` (case-insensitive), or None."""
    for b in bindings:
        if _equals_ignore_case(b.get_name(), name):
            return b
    return None


def filter_bindings(
    bindings: Sequence[Binding],
    type: Optional[str] = None,
    provider: Optional[str] = None,
) -> list[Binding]:
    """
    Return the bindings with the given type and provider, in input order.

    An argument left as None does not filter. Comparisons are case-insensitive.
    When `type` is given every binding must declare a type; MissingTypeError
    is raised otherwise.
    """
    return [b for b in bindings if _matches(b, type, provider)]


async def filter_bindings_async(
    bindings: Sequence[Binding],
    type: Optional[str] = None,
    provider: Optional[str] = None,
) -> list[Binding]:
    """
    Same as filter_bindings, but every binding is checked concurrently in a
    worker thread. Results keep input order.
    """
    matches = await asyncio.gather(
        *[asyncio.to_thread(_matches, b, type, provider) for b in bindings]
    )
    return [b for b, m in zip(bindings, matches) if m]


def _matches(binding: Binding, type: Optional[str], provider: Optional[str]) -> bool:
    if type is not None and not _equals_ignore_case(get_type(binding), type):
        return False

    if provider is not None:
        p = get_provider(binding)
        if p is None or not _equals_ignore_case(p, provider):
            return False

    return True


def _equals_ignore_case(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()
