"""High-level compositing service — facade for the API layer."""

from __future__ import annotations
import logging
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from galleria.config import Settings
from galleria.errors import (
    CompositingError, GalleriaError, ImageDecodeError, MissingInputError,
)
from galleria.models import (
    CompositeRequest, CompositeResult, CompositeSubmission, StoredMockup,
)
from galleria.core.compositor import MockupCompositor
from galleria.core.registry import FrameStyleRegistry, create_default_registry
from galleria.services.fetcher import ImageFetcher
from galleria.services.storage import OutputStore, ScratchSpace

logger = logging.getLogger(__name__)


def load_image(path: Path, field: str) -> Image.Image:
    """Decode a raster fully into memory, applying any EXIF rotation."""
    try:
        with Image.open(path) as img:
            img.load()
            return ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(field, f"Could not decode {field} image: {e}") from e


class CompositeService:
    """Validates input, resolves image sources, runs the compositor, stores output."""

    def __init__(
        self,
        settings: Settings | None = None,
        fetcher: ImageFetcher | None = None,
        store: OutputStore | None = None,
        registry: FrameStyleRegistry | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.fetcher = fetcher or ImageFetcher(timeout=self.settings.fetch_timeout)
        self.store = store or OutputStore(
            self.settings.output_dir, self.settings.output_url_prefix,
        )
        self.registry = registry or create_default_registry()
        self.compositor = MockupCompositor(self.registry)

    def validate(self, submission: CompositeSubmission) -> None:
        """Reject a submission missing required inputs, before any work."""
        if not submission.artwork:
            raise MissingInputError("artwork", "Artwork image is required")
        if not submission.environment and not submission.environment_url:
            raise MissingInputError(
                "environment",
                "Either environment file or environment URL is required",
            )

    def render(self, submission: CompositeSubmission) -> CompositeResult:
        """Run the full pipeline in memory; scratch files never outlive this call."""
        self.validate(submission)
        frame = submission.frame_spec
        logger.info(
            "compositing frame=%s style=%s size=%sx%s%s mat=%s",
            frame.mode, getattr(frame, "style", "-"),
            submission.width, submission.height, submission.unit or "in",
            submission.mat_option or "none",
        )

        with ScratchSpace(self.settings.upload_dir) as scratch:
            artwork_path = scratch.write(submission.artwork or b"")

            if submission.environment:
                env_path = scratch.write(submission.environment)
            else:
                env_path = scratch.write(self.fetcher.fetch(submission.environment_url or ""))

            frame_image = None
            if submission.ai_frame_image_url:
                frame_path = scratch.write(self.fetcher.fetch(submission.ai_frame_image_url))
                frame_image = load_image(frame_path, "frame")

            request = CompositeRequest(
                artwork=submission.artwork_spec,
                frame=frame,
                mat=submission.mat_spec,
                anchor=submission.anchor,
                artwork_image=load_image(artwork_path, "artwork"),
                environment_image=load_image(env_path, "environment"),
                frame_image=frame_image,
            )
            return self.compositor.compose(request)

    def compose(self, submission: CompositeSubmission) -> StoredMockup:
        """Composite one submission and write the JPEG to the output store."""
        try:
            result = self.render(submission)
            output_id, path = self.store.save(result.to_jpeg(self.settings.jpeg_quality))
        except GalleriaError as e:
            logger.warning("composite rejected: %s", e)
            raise
        except Exception as e:
            logger.exception("compositing failed")
            raise CompositingError(f"Compositing failed: {e}") from e

        logger.info(
            "stored mockup %s (%dx%d framed, %dx%d artwork)",
            output_id, result.total_width, result.total_height,
            result.artwork_width, result.artwork_height,
        )
        return StoredMockup(
            output_id=output_id,
            filename=path.name,
            url=self.store.url_for(path.name),
            total_width=result.total_width,
            total_height=result.total_height,
            artwork_width=result.artwork_width,
            artwork_height=result.artwork_height,
        )
