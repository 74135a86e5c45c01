"""Filesystem storage: per-request scratch files and finished outputs."""

from __future__ import annotations
import logging
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)


class ScratchSpace:
    """
    Temporary files for a single request.

    Every file written through `write()` gets a unique name and is removed
    when the `with` block exits, whether or not it raised.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.paths: list[Path] = []

    def __enter__(self) -> ScratchSpace:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()

    def write(self, data: bytes, suffix: str = ".png") -> Path:
        path = self.directory / f"temp-{uuid.uuid4()}{suffix}"
        self.paths.append(path)
        path.write_bytes(data)
        return path

    def cleanup(self) -> None:
        while self.paths:
            path = self.paths.pop()
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("could not remove scratch file %s: %s", path, e)


class OutputStore:
    """Writes finished mockups under unique names and maps them to URLs."""

    def __init__(self, directory: Path, url_prefix: str = "/outputs") -> None:
        self.directory = directory
        self.url_prefix = url_prefix.rstrip("/")

    def save(self, data: bytes, suffix: str = ".jpg") -> tuple[str, Path]:
        self.directory.mkdir(parents=True, exist_ok=True)
        output_id = str(uuid.uuid4())
        path = self.directory / f"{output_id}{suffix}"
        path.write_bytes(data)
        return output_id, path

    def url_for(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"
