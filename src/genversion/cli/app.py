from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config.settings import get_settings
from ..domain.errors import GenVersionError
from ..workflow.generator import VersionGenerator

app = typer.Typer(add_completion=False, help="Generate src/pkg-version.ts from package.json and the workspace Cargo.toml.")
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("genversion")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


@app.command()
def generate(
    root: Optional[Path] = typer.Option(
        None, "--root", file_okay=False, resolve_path=True, help="Directory the manifest paths are relative to."
    ),
    package_manifest: Optional[Path] = typer.Option(None, "--package-manifest", help="Defaults to package.json."),
    workspace_manifest: Optional[Path] = typer.Option(
        None, "--workspace-manifest", help="Defaults to ../../Cargo.toml."
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Defaults to src/pkg-version.ts."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """
    Write PACKAGE_VERSION and TARGETED_RPC_VERSION constants for the SDK.
    """

    _configure_logging(verbose)

    settings = get_settings(
        root=root,
        package_manifest=package_manifest,
        workspace_manifest=workspace_manifest,
        output_path=output,
    )
    generator = VersionGenerator(settings)

    try:
        module = generator.generate()
    except (OSError, ValueError, GenVersionError) as exc:
        err_console.print(f"[red]Error generating version module: {escape(str(exc))}[/]")
        raise typer.Exit(code=1) from exc

    console.print(
        f"[green]✓[/] PACKAGE_VERSION=[bold]{escape(module.package_version)}[/] "
        f"TARGETED_RPC_VERSION=[bold]{escape(module.targeted_rpc_version)}[/] "
        f"-> {escape(str(settings.output_file))}"
    )


def main() -> None:
    app()
