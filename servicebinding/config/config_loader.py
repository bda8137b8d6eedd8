"""
Purpose:
    - Load a TOML file
    - Build a validated DiscoveryConfig from its [service_binding] table

Example file:

    [service_binding]
    root = "/bindings"
    cache = true
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from servicebinding.config.configs import DiscoveryConfig
from servicebinding.errors.errors import ConfigurationError

SECTION: str = "service_binding"


class ConfigLoader:
    """
    Config-loader; loading toml file.
    """

    def __init__(self, base_dir: str = ".") -> None:
        self._base_dir = base_dir

    def load(self, file_name: str) -> dict[str, Any]:
        path = Path(file_name)
        if not path.is_absolute():
            path = Path(self._base_dir) / file_name

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open("rb") as f:
            return tomllib.load(f)

    def load_discovery_config(self, file_name: str) -> DiscoveryConfig:
        data = self.load(file_name)

        section = data.get(SECTION, {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"[{SECTION}] must be a table", field=SECTION)

        section = dict(section)
        root_raw = section.get("root")
        if root_raw == "":
            section["root"] = None
        elif isinstance(root_raw, str):
            root = Path(root_raw)
            if not root.is_absolute():
                root = Path(self._base_dir) / root
            section["root"] = root

        try:
            return DiscoveryConfig(**section)
        except ValidationError as exc:
            errors = exc.errors()
            first = errors[0] if errors else {}
            raise ConfigurationError(
                f"Invalid [{SECTION}] configuration in {file_name}",
                field=".".join(str(p) for p in first.get("loc", ())) or None,
                details={"errors": [e.get("msg") for e in errors]},
            ) from exc
