from __future__ import annotations

import logging
from typing import Optional

from ..config.settings import GeneratorSettings, get_settings
from ..domain.models import GeneratedModule
from ..services.manifests.loader import load_package_descriptor, load_workspace_descriptor
from ..services.rendering.template import render_module


LOG = logging.getLogger(__name__)


class VersionGenerator:
    """
    Reads both manifests and (re)writes the generated version module.

    Errors are not caught here: a failed read leaves the output file untouched,
    a failed write may leave it partially written.
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None) -> None:
        self.settings = settings or get_settings()

    def collect(self) -> GeneratedModule:
        package = load_package_descriptor(self.settings.package_manifest_path)
        workspace = load_workspace_descriptor(self.settings.workspace_manifest_path)
        LOG.debug("Package version %s from %s", package.version, package.source)
        LOG.debug("Workspace version %s from %s", workspace.version, workspace.source)
        return GeneratedModule.from_descriptors(package, workspace, self.settings.license_header)

    def generate(self) -> GeneratedModule:
        module = self.collect()
        output = self.settings.output_file

        with output.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(render_module(module))

        LOG.info(
            "Wrote %s (package %s, rpc %s)",
            output,
            module.package_version,
            module.targeted_rpc_version,
        )
        return module
