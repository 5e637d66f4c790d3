"""Local file access for uploads."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadFile:
    name: str
    content: bytes


def read_upload(path: str | Path) -> UploadFile:
    """Read a local file for upload; OSError propagates to the caller."""

    source = Path(path).expanduser()
    if not source.is_file():
        raise FileNotFoundError(f"No such file: {source}")
    return UploadFile(name=source.name, content=source.read_bytes())
