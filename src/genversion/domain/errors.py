from __future__ import annotations

from pathlib import Path
from typing import Sequence


class GenVersionError(Exception):
    """
    Base class for failures raised by the version generator itself.

    I/O and parse failures are not wrapped; they surface as the `OSError` or
    `ValueError` raised by the file system and the JSON/TOML parsers.
    """


class ManifestFieldError(GenVersionError, KeyError):
    """
    Raised when a manifest parses but lacks a string at the expected key path.
    """

    def __init__(self, manifest: Path, key_path: Sequence[str], reason: str = "missing") -> None:
        self.manifest = manifest
        self.key_path = tuple(key_path)
        self.reason = reason
        super().__init__(f"{manifest}: '{self.dotted_key}' is {reason}")

    @property
    def dotted_key(self) -> str:
        return ".".join(self.key_path)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
