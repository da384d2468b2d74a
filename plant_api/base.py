from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ImageFile:
    """An image chosen by the user, forwarded to the service as-is."""

    name: str
    content: bytes
    mime_type: str = "application/octet-stream"


@dataclass(frozen=True)
class HealthReport:
    """Outcome of the ``/api/test-ai`` probe."""

    ok: bool
    message: str | None = None


@dataclass(frozen=True)
class Prediction:
    disease: str
    confidence: float


class PlantServiceClient(ABC):
    """Abstract interface for the remote inference/treatment service."""

    @abstractmethod
    def check_health(self) -> HealthReport:  # noqa: D401
        """Probe the service; raise ``ServiceUnavailable`` if it is unreachable."""

    @abstractmethod
    def predict(self, image: ImageFile, language: str) -> Prediction:  # noqa: D401
        """Return the diagnosis for *image*, answered in *language*."""

    @abstractmethod
    def treatment(self, disease_name: str, language: str) -> str:  # noqa: D401
        """Return remedial advice for *disease_name* in *language*."""


# ---------------------------------------------------------------------------
# Factory helper
# ---------------------------------------------------------------------------

def get_client(base_url: str | None = None, **kwargs: Any) -> "PlantServiceClient":
    """Return the HTTP client for *base_url* (defaults to ``SETTINGS.api_url``)."""

    from .http import HttpPlantServiceClient  # local import to keep requests optional for fakes

    return HttpPlantServiceClient(base_url=base_url, **kwargs)


def payload_message(payload: Dict[str, Any], key: str) -> str | None:
    """Return ``payload[key]`` as a string when it is present and truthy."""
    value = payload.get(key)
    if not value:
        return None
    return str(value)
