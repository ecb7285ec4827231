"""Generation of the project's ``package.json``."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from vuescaffold.engine.resolver import ModuleResolver

logger = logging.getLogger(__name__)

VERSION_TABLE: dict[str, str] = {
    # Dependencies
    "vue": "^3.4.0",
    "ant-design-vue": "^4.0.0",
    "vue-router": "^4.2.0",
    "pinia": "^2.1.0",
    "@ant-design/icons-vue": "^7.0.0",
    # Dev dependencies
    "@types/node": "^20.0.0",
    "@typescript-eslint/eslint-plugin": "^6.0.0",
    "@typescript-eslint/parser": "^6.0.0",
    "@vitejs/plugin-vue": "^4.5.0",
    "eslint": "^8.45.0",
    "eslint-plugin-vue": "^9.17.0",
    "prettier": "^3.0.0",
    "typescript": "^5.2.0",
    "vite": "^5.0.0",
    "vue-tsc": "^1.8.0",
    "sass": "^1.69.0",
    "less": "^4.2.0",
}

SCRIPTS: dict[str, str] = {
    "dev": "vite",
    "build": "vue-tsc && vite build",
    "preview": "vite preview",
    "lint": "eslint . --ext vue,js,jsx,ts,tsx --fix",
    "format": "prettier --write src/",
}


def pin_versions(
    identifiers: Iterable[str], versions: Mapping[str, str] = VERSION_TABLE
) -> dict[str, str]:
    """Map identifiers to versions. Identifiers without a known version are dropped."""
    pinned: dict[str, str] = {}
    for identifier in identifiers:
        if identifier not in versions:
            logger.debug("No version known for %r, leaving it out of package.json", identifier)
            continue
        pinned[identifier] = versions[identifier]
    return pinned


def build_manifest(
    resolver: ModuleResolver, versions: Mapping[str, str] = VERSION_TABLE
) -> dict[str, Any]:
    """Build the ``package.json`` object for the resolver's configuration."""
    return {
        "name": resolver.config.project_name,
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": dict(SCRIPTS),
        "dependencies": pin_versions(resolver.dependencies(), versions),
        "devDependencies": pin_versions(resolver.dev_dependencies(), versions),
    }


def dump_manifest(manifest: Mapping[str, Any]) -> str:
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
