"""
Kubernetes Service Binding client.

Reads service bindings projected into a container's filesystem: one
directory per binding, one file per entry, under $SERVICE_BINDING_ROOT.

Components:
- Binding: port for a named set of raw entries
- MapBinding, ConfigTreeBinding, CacheBinding: in-memory, on-disk and caching bindings
- get, get_provider, get_type: typed accessors
- from_path, from_service_binding_root, discover: binding discovery
- find, filter_bindings, filter_bindings_async: queries over discovered bindings

Usage:
    import servicebinding

    bindings = servicebinding.from_service_binding_root()
    [pg] = servicebinding.filter_bindings(bindings, type="postgresql")
    url = servicebinding.get(pg, "url")
"""

from servicebinding.adapters.cache_binding import CacheBinding
from servicebinding.adapters.config_tree import ConfigTreeBinding
from servicebinding.adapters.map_binding import MapBinding
from servicebinding.config.config_loader import ConfigLoader
from servicebinding.config.configs import DiscoveryConfig
from servicebinding.core.binding import PROVIDER, TYPE, get, get_provider, get_type
from servicebinding.core.bindings import (
    SERVICE_BINDING_ROOT,
    cached,
    discover,
    filter_bindings,
    filter_bindings_async,
    find,
    from_path,
    from_service_binding_root,
)
from servicebinding.core.secret import is_valid_secret_key
from servicebinding.errors.errors import (
    ConfigurationError,
    MissingTypeError,
    ServiceBindingError,
)
from servicebinding.ports.binding import Binding

__all__ = [
    # Port
    "Binding",
    # Bindings
    "MapBinding",
    "ConfigTreeBinding",
    "CacheBinding",
    # Accessors
    "PROVIDER",
    "TYPE",
    "get",
    "get_provider",
    "get_type",
    "is_valid_secret_key",
    # Collections
    "SERVICE_BINDING_ROOT",
    "cached",
    "discover",
    "find",
    "filter_bindings",
    "filter_bindings_async",
    "from_path",
    "from_service_binding_root",
    # Config
    "ConfigLoader",
    "DiscoveryConfig",
    # Errors
    "ServiceBindingError",
    "MissingTypeError",
    "ConfigurationError",
]
