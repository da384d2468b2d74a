"""HTTP client for the plant disease inference service.

Three endpoints are used:
- ``GET  /api/test-ai``            - readiness probe
- ``POST /api/predict``            - multipart image + language -> diagnosis
- ``POST /api/treatment-solution`` - JSON disease name + language -> advice

Transport and decoding problems are translated into the exceptions from
``plant_api.errors`` so callers only ever see that taxonomy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from config.settings import SETTINGS

from .base import HealthReport, ImageFile, PlantServiceClient, Prediction, payload_message
from .errors import (
    ApplicationError,
    IncompleteResponse,
    RequestFailed,
    ServiceUnavailable,
)

logger = logging.getLogger(__name__)


class HttpPlantServiceClient(PlantServiceClient):
    """``requests``-based client for the inference/treatment service."""

    HEALTH_PATH = "/api/test-ai"
    PREDICT_PATH = "/api/predict"
    TREATMENT_PATH = "/api/treatment-solution"

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        base_url = base_url or SETTINGS.api_url
        if not base_url:
            raise ValueError("Plant service base URL must be provided.")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else SETTINGS.request_timeout_sec

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------

    def check_health(self) -> HealthReport:
        url = f"{self.base_url}{self.HEALTH_PATH}"
        try:
            response = requests.get(url, timeout=self.timeout)
            payload = self._decode(response)
        except (requests.RequestException, RequestFailed) as e:
            logger.warning(f"Health probe failed: {e}")
            raise ServiceUnavailable(str(e)) from e

        ok = response.ok and payload.get("status") == "success"
        return HealthReport(ok=ok, message=payload_message(payload, "message"))

    def predict(self, image: ImageFile, language: str) -> Prediction:
        url = f"{self.base_url}{self.PREDICT_PATH}"
        files = {"image": (image.name, image.content, image.mime_type)}
        data = {"language": language}

        logger.info(f"Submitting {image.name} for diagnosis ({language})")
        try:
            response = requests.post(url, files=files, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise RequestFailed(str(e)) from e

        if not response.ok:
            raise RequestFailed(
                f"Prediction request failed: {response.status_code} - {response.reason}",
                status_code=response.status_code,
            )

        payload = self._decode(response)
        error = payload_message(payload, "error")
        if error:
            raise ApplicationError(error)

        if payload.get("disease") is None or payload.get("confidence") is None:
            raise IncompleteResponse(f"No diagnosis in response: {payload}", response.status_code)

        try:
            confidence = float(payload["confidence"])
        except (TypeError, ValueError) as e:
            raise IncompleteResponse(f"Invalid confidence value: {payload['confidence']!r}") from e

        return Prediction(disease=str(payload["disease"]), confidence=confidence)

    def treatment(self, disease_name: str, language: str) -> str:
        url = f"{self.base_url}{self.TREATMENT_PATH}"
        body = {"disease_name": disease_name, "language": language}

        logger.info(f"Requesting treatment for {disease_name} ({language})")
        try:
            response = requests.post(url, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise RequestFailed(str(e)) from e

        if not response.ok:
            raise RequestFailed(
                f"Treatment request failed: {response.status_code} - {response.reason}",
                status_code=response.status_code,
            )

        payload = self._decode(response)
        error = payload_message(payload, "error")
        if error:
            raise ApplicationError(error)

        text = payload_message(payload, "treatment")
        if text is None:
            raise IncompleteResponse(f"No treatment in response: {payload}", response.status_code)
        return text

    # ---------------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------------

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise RequestFailed(
                f"Invalid JSON from {response.url}: {e}", status_code=response.status_code
            ) from e
        if not isinstance(payload, dict):
            raise RequestFailed(
                f"Unexpected response shape from {response.url}: {payload!r}",
                status_code=response.status_code,
            )
        return payload
