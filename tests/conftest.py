from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import pytest

from genversion.config.settings import GeneratorSettings


class SdkCheckout:
    """
    Lays out `<repo>/Cargo.toml` and `<repo>/sdk/typescript/{package.json,src/}`
    so the default relative paths resolve the way they do in the monorepo.
    """

    def __init__(self, repo: Path) -> None:
        self.repo = repo
        self.sdk_dir = repo / "sdk" / "typescript"
        (self.sdk_dir / "src").mkdir(parents=True)

    @property
    def package_json(self) -> Path:
        return self.sdk_dir / "package.json"

    @property
    def cargo_toml(self) -> Path:
        return self.repo / "Cargo.toml"

    @property
    def output(self) -> Path:
        return self.sdk_dir / "src" / "pkg-version.ts"

    def write_package(self, version: Optional[str] = "1.2.3") -> None:
        payload = {"name": "@mysten/sui", "private": False}
        if version is not None:
            payload["version"] = version
        self.package_json.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def write_workspace(self, version: Optional[str] = "4.5.6") -> None:
        lines = ["[workspace]", 'members = ["crates/*"]', ""]
        if version is not None:
            lines += ["[workspace.package]", f'version = "{version}"', 'edition = "2021"', ""]
        self.cargo_toml.write_text("\n".join(lines), encoding="utf-8")

    def settings(self) -> GeneratorSettings:
        return GeneratorSettings(root=self.sdk_dir)


@pytest.fixture
def checkout(tmp_path: Path) -> SdkCheckout:
    return SdkCheckout(tmp_path / "sui")
