"""Remote image download — the only network access in the compositor."""

from __future__ import annotations
import logging

import requests

from galleria.errors import UpstreamFetchError

logger = logging.getLogger(__name__)


class ImageFetcher:
    """Downloads raster bytes over HTTP. One attempt, no retries."""

    def __init__(self, timeout: float = 30.0, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        # fetches run on worker threads; a Session is only used when injected
        self.session = session

    def fetch(self, url: str) -> bytes:
        logger.info("downloading image %s", url)
        try:
            get = self.session.get if self.session is not None else requests.get
            resp = get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamFetchError(url, f"Failed to download image: {e}") from e

        if not resp.ok:
            raise UpstreamFetchError(
                url, f"Failed to download image: {resp.status_code} {resp.reason}",
            )
        return resp.content
