"""Display-only preview handles for the selected image.

A preview URL is an opaque ``preview://`` reference to the image bytes held
by a ``PreviewStore``. Handles must be released when the image they belong to
is replaced or cleared; the store keeps track of what is still live.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict

from plant_api.base import ImageFile

logger = logging.getLogger(__name__)

SCHEME = "preview://"


class PreviewStore:
    """Issue and revoke preview URLs for ``ImageFile`` objects."""

    def __init__(self):
        self._live: Dict[str, ImageFile] = {}
        self._lock = threading.Lock()

    def create(self, image: ImageFile) -> str:
        url = f"{SCHEME}{uuid.uuid4().hex}"
        with self._lock:
            self._live[url] = image
        logger.debug(f"Created preview {url} for {image.name}")
        return url

    def release(self, url: str | None) -> None:
        """Revoke *url*; releasing an unknown or ``None`` handle does nothing."""
        if url is None:
            return
        with self._lock:
            released = self._live.pop(url, None)
        if released is not None:
            logger.debug(f"Released preview {url}")

    def get(self, url: str) -> ImageFile | None:
        with self._lock:
            return self._live.get(url)

    def is_live(self, url: str) -> bool:
        with self._lock:
            return url in self._live

    @property
    def live_count(self) -> int:
        with self._lock:
            return len(self._live)
