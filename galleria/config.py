"""Service configuration, read from the environment (and an optional .env file)."""

from __future__ import annotations
import logging
import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel

from galleria.core.sanitize import non_negative_int, positive_float

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Paths and limits passed explicitly into the app and service."""
    upload_dir: Path = Path("uploads")     # Scratch files for uploads/downloads
    output_dir: Path = Path("outputs")     # Finished mockups
    output_url_prefix: str = "/outputs"
    client_url: str = "http://localhost:3000"  # CORS origin
    fetch_timeout: float = 30.0            # Seconds per remote image download
    jpeg_quality: int = 95
    log_level: str = "INFO"
    port: int = 4000

    def ensure_dirs(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self.output_dir.mkdir(parents=True, exist_ok=True)


def load_settings() -> Settings:
    """Build settings from GALLERIA_* environment variables."""
    load_dotenv()
    defaults = Settings()
    quality = non_negative_int(os.getenv("GALLERIA_JPEG_QUALITY"), defaults.jpeg_quality)
    return Settings(
        upload_dir=Path(os.getenv("GALLERIA_UPLOAD_DIR", str(defaults.upload_dir))),
        output_dir=Path(os.getenv("GALLERIA_OUTPUT_DIR", str(defaults.output_dir))),
        client_url=os.getenv("GALLERIA_CLIENT_URL", defaults.client_url),
        fetch_timeout=positive_float(os.getenv("GALLERIA_FETCH_TIMEOUT"), defaults.fetch_timeout),
        jpeg_quality=max(1, min(95, quality)) if quality else defaults.jpeg_quality,
        log_level=os.getenv("GALLERIA_LOG_LEVEL", defaults.log_level).upper(),
        port=non_negative_int(os.getenv("PORT"), defaults.port) or defaults.port,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
