from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_LICENSE_HEADER = (
    "// Copyright (c) Mysten Labs, Inc.\n"
    "// SPDX-License-Identifier: Apache-2.0\n"
    "\n"
)


@dataclass
class GeneratorSettings:
    """
    Locations of the two manifests and the generated module.

    Relative paths are resolved against `root`, which defaults to the directory
    the generator is invoked from.
    """

    root: Path = field(default_factory=Path.cwd)
    package_manifest: Path = Path("package.json")
    workspace_manifest: Path = Path("../../Cargo.toml")
    output_path: Path = Path("src/pkg-version.ts")
    license_header: str = DEFAULT_LICENSE_HEADER

    def resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root / path

    @property
    def package_manifest_path(self) -> Path:
        return self.resolve(self.package_manifest)

    @property
    def workspace_manifest_path(self) -> Path:
        return self.resolve(self.workspace_manifest)

    @property
    def output_file(self) -> Path:
        return self.resolve(self.output_path)


def get_settings(
    root: Optional[Path] = None,
    package_manifest: Optional[Path] = None,
    workspace_manifest: Optional[Path] = None,
    output_path: Optional[Path] = None,
) -> GeneratorSettings:
    settings = GeneratorSettings()

    if root is not None:
        settings.root = root
    if package_manifest is not None:
        settings.package_manifest = package_manifest
    if workspace_manifest is not None:
        settings.workspace_manifest = workspace_manifest
    if output_path is not None:
        settings.output_path = output_path

    return settings
