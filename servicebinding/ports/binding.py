"""Binding Port Interface.

References: Kubernetes Service Binding Specification, workload projection
(https://github.com/k8s-service-bindings/spec#workload-projection).

Contract: Retrieve the raw contents of a binding entry by key; None when absent.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Binding(Protocol):
    def get_as_bytes(self, key: str) -> Optional[bytes]: ...

    """
    Return the contents of a binding entry in its raw form, or None if the
    entry does not exist or the key is not a valid Secret key.
    """

    def get_name(self) -> str: ...

    """
    Return the name of the binding.
    """
