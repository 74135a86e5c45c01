from __future__ import annotations
import io

import pytest
from PIL import Image

from galleria.config import Settings
from galleria.errors import UpstreamFetchError


def solid(size: tuple[int, int], color, mode: str = "RGB") -> Image.Image:
    return Image.new(mode, size, color)


def png_bytes(size: tuple[int, int], color, mode: str = "RGB") -> bytes:
    buf = io.BytesIO()
    solid(size, color, mode).save(buf, format="PNG")
    return buf.getvalue()


def close_to(actual, expected, tolerance: int = 3) -> bool:
    return all(abs(a - e) <= tolerance for a, e in zip(actual, expected))


class FakeFetcher:
    """Serves canned bytes per URL; anything else fails like an unreachable host."""

    def __init__(self, responses: dict[str, bytes] | None = None) -> None:
        self.responses = responses or {}
        self.requested: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        if url not in self.responses:
            raise UpstreamFetchError(url, "Failed to download image: 404 Not Found")
        return self.responses[url]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(upload_dir=tmp_path / "uploads", output_dir=tmp_path / "outputs")


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher({
        "https://images.example/room.png": png_bytes((1920, 1200), (120, 120, 120)),
        "https://images.example/frame.png": png_bytes((800, 600), (0, 0, 255, 255), "RGBA"),
    })
