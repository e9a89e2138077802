from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PackageDescriptor:
    """
    The slice of `package.json` the generator consumes.
    """

    version: str
    source: Path


@dataclass(frozen=True)
class WorkspaceDescriptor:
    """
    The slice of the workspace `Cargo.toml` the generator consumes
    (`workspace.package.version`).
    """

    version: str
    source: Path


@dataclass(frozen=True)
class GeneratedModule:
    package_version: str
    targeted_rpc_version: str
    license_header: str

    @classmethod
    def from_descriptors(
        cls,
        package: PackageDescriptor,
        workspace: WorkspaceDescriptor,
        license_header: str,
    ) -> "GeneratedModule":
        return cls(
            package_version=package.version,
            targeted_rpc_version=workspace.version,
            license_header=license_header,
        )
