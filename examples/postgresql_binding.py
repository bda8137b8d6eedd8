#!/usr/bin/env python3
"""
Resolve a PostgreSQL connection URL from the service bindings projected
under $SERVICE_BINDING_ROOT.

Usage:
    SERVICE_BINDING_ROOT=/bindings python examples/postgresql_binding.py
"""

from __future__ import annotations

import logging
import sys

import servicebinding

logger = logging.getLogger("examples.postgresql_binding")


def resolve_url() -> str:
    bindings = servicebinding.cached(servicebinding.from_service_binding_root())
    matches = servicebinding.filter_bindings(bindings, "postgresql")
    if len(matches) != 1:
        raise RuntimeError(f"Incorrect number of PostgreSQL bindings: {len(matches)}")

    url = servicebinding.get(matches[0], "url")
    if url is None:
        raise RuntimeError("No URL in binding")
    return url


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    try:
        url = resolve_url()
    except (RuntimeError, servicebinding.MissingTypeError) as e:
        logger.error(f"Cannot resolve PostgreSQL binding: {e}")
        return 1

    # pass `url` to the database driver of your choice
    logger.info("Resolved PostgreSQL binding")
    print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
