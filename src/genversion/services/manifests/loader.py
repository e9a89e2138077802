from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import tomli

from ...domain.errors import ManifestFieldError
from ...domain.models import PackageDescriptor, WorkspaceDescriptor


LOG = logging.getLogger(__name__)

PACKAGE_VERSION_KEY = ("version",)
WORKSPACE_VERSION_KEY = ("workspace", "package", "version")


def load_package_descriptor(path: Path) -> PackageDescriptor:
    """
    Parse a `package.json` and pull out its top-level `version`.

    Missing files and malformed JSON propagate as `FileNotFoundError` and
    `json.JSONDecodeError` respectively.
    """

    LOG.debug("Reading package manifest %s", path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    version = _extract_string(raw, PACKAGE_VERSION_KEY, path)
    return PackageDescriptor(version=version, source=path)


def load_workspace_descriptor(path: Path) -> WorkspaceDescriptor:
    """
    Parse a workspace `Cargo.toml` and pull out `workspace.package.version`.
    """

    LOG.debug("Reading workspace manifest %s", path)
    with path.open("rb") as handle:
        raw = tomli.load(handle)
    version = _extract_string(raw, WORKSPACE_VERSION_KEY, path)
    return WorkspaceDescriptor(version=version, source=path)


def _extract_string(raw: Any, key_path: Sequence[str], manifest: Path) -> str:
    node = raw
    for depth, key in enumerate(key_path):
        if not isinstance(node, Mapping):
            parent = ".".join(key_path[:depth]) or "document root"
            raise ManifestFieldError(manifest, key_path, reason=f"unreachable ({parent} is not a table)")
        if key not in node:
            raise ManifestFieldError(manifest, key_path)
        node = node[key]

    if not isinstance(node, str):
        raise ManifestFieldError(manifest, key_path, reason=f"not a string ({type(node).__name__})")
    return node
