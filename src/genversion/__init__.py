from importlib import metadata

try:
    __version__ = metadata.version("sui-sdk-genversion")
except metadata.PackageNotFoundError:  # pragma: no cover - dev installs only
    __version__ = "0.0.0"

__all__ = ["__version__"]
