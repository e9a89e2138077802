from __future__ import annotations

from ...domain.models import GeneratedModule


EXPORT_LINE = "export const {name} = '{value}';\n"


def render_module(module: GeneratedModule) -> str:
    # Interpolated verbatim, no escaping.
    return (
        module.license_header
        + EXPORT_LINE.format(name="PACKAGE_VERSION", value=module.package_version)
        + EXPORT_LINE.format(name="TARGETED_RPC_VERSION", value=module.targeted_rpc_version)
    )
