"""Detection session controller.

Owns the ``Session`` for one user, exposes the actions the UI can trigger and
runs the three service calls (health probe, predict, treatment) on a small
thread pool. Each network action returns a ``Future`` that resolves to the
session *after* the call's outcome has been applied, or discarded if the
session moved on while the request was in flight.

All reads and writes of the session happen under one lock, so transitions are
applied one at a time in a well-defined order no matter which thread finishes
first.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

from config.settings import SETTINGS
from plant_api import (
    ApplicationError,
    ImageFile,
    IncompleteResponse,
    PlantServiceClient,
    PlantServiceError,
    RequestFailed,
    ServiceUnavailable,
    ValidationError,
    get_client,
)

from . import session as transitions
from .locale import resolve_language
from .messages import Translator, translate
from .preview import PreviewStore
from .session import Diagnosis, ServiceStatus, Session, Submission, Treatment

logger = logging.getLogger(__name__)


class DetectionSessionController:
    """Drive one detection session against a ``PlantServiceClient``."""

    def __init__(
        self,
        client: PlantServiceClient | None = None,
        *,
        locale: str | None = None,
        translator: Translator | None = None,
        previews: PreviewStore | None = None,
        executor: ThreadPoolExecutor | None = None,
    ):
        self._client = client or get_client()
        self._translate = translator or translate
        self.previews = previews or PreviewStore()

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=SETTINGS.max_workers, thread_name_prefix="plant-api"
        )

        self._lock = threading.RLock()
        self._session = Session(locale=locale or SETTINGS.default_locale)

        self._init_future: Future | None = None
        self._status_future: Future | None = None
        self._predict_future: Future | None = None
        self._treatment_future: Future | None = None

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "DetectionSessionController":
        """Build a controller from ``config.parse_args()`` output."""
        client = get_client(settings.api_url, timeout=settings.timeout)
        return cls(client, locale=settings.locale, **kwargs)

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        with self._lock:
            return self._session

    def _message(self, key: str) -> str:
        return self._translate(key, self.session.locale)

    def _apply(self, generation: int | None, transition: Callable[[Session], Session], label: str) -> Session:
        """Apply *transition* unless the session has moved past *generation*."""
        with self._lock:
            if generation is not None and self._session.generation != generation:
                logger.debug(
                    f"Discarding stale {label} result "
                    f"(generation {generation}, current {self._session.generation})"
                )
                return self._session
            self._session = transition(self._session)
            return self._session

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> Future:
        """Start the session: probe the service once."""
        with self._lock:
            if self._init_future is None:
                self._init_future = self.check_service_status()
            return self._init_future

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            self.previews.release(self._session.preview_url)
            self._session = transitions.clear_image(self._session)
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "DetectionSessionController":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_locale(self, locale: str) -> Session:
        return self._apply(None, lambda s: transitions.set_locale(s, locale), "locale")

    def check_service_status(self) -> Future:
        with self._lock:
            if self._status_future is not None and not self._status_future.done():
                return self._status_future
            self._session = transitions.start_status_check(self._session)
            self._status_future = self._executor.submit(self._run_status_check)
            return self._status_future

    def wait_for_status_check(self, timeout: float | None = None) -> Session:
        """Block until the health probe already in flight, if any, has been applied."""
        with self._lock:
            future = self._status_future
        if future is not None:
            future.result(timeout=timeout)
        return self.session

    def select_image(self, image: ImageFile | None) -> Session:
        if image is None:
            return self.session
        with self._lock:
            # release before create: at most one live preview per session
            self.previews.release(self._session.preview_url)
            preview_url = self.previews.create(image)
            self._session = transitions.select_image(self._session, image, preview_url)
            logger.info(f"Selected image {image.name} ({len(image.content)} bytes)")
            return self._session

    def clear_image(self) -> Session:
        with self._lock:
            self.previews.release(self._session.preview_url)
            self._session = transitions.clear_image(self._session)
            return self._session

    def submit_for_diagnosis(self) -> Future | None:
        """Send the selected image for diagnosis.

        Returns ``None`` without touching the network when there is no image or
        a diagnosis is already running; the reason is recorded in
        ``session.error``.
        """
        with self._lock:
            current = self._session
            if current.selected_image is None:
                return self._reject(ValidationError(self._message("no_image_selected")))
            if current.submission.is_submitting:
                return self._reject(ValidationError(self._message("analysis_in_progress")))

            self._session = transitions.start_submission(current)
            generation = self._session.generation
            image = current.selected_image
            language = resolve_language(current.locale)
            self._predict_future = self._executor.submit(
                self._run_predict, generation, image, language
            )
            return self._predict_future

    def request_treatment(self) -> Future | None:
        """Fetch remedial advice for the current diagnosis; no-op without one."""
        with self._lock:
            current = self._session
            if not current.submission.is_succeeded:
                logger.debug("Treatment requested without a diagnosis; ignoring")
                return None
            if current.treatment.is_loading:
                return self._treatment_future

            self._session = transitions.start_treatment(current)
            generation = self._session.generation
            disease = current.submission.diagnosis.disease_label
            language = resolve_language(current.locale)
            self._treatment_future = self._executor.submit(
                self._run_treatment, generation, disease, language
            )
            return self._treatment_future

    def _reject(self, error: ValidationError) -> None:
        logger.info(f"Submission rejected: {error}")
        self._session = transitions.reject_submission(self._session, str(error))
        return None

    # ------------------------------------------------------------------
    # Background work
    # ------------------------------------------------------------------

    def _run_status_check(self) -> Session:
        try:
            report = self._client.check_health()
            if report.ok:
                status = ServiceStatus.available(self._message("ai_status_success"))
            else:
                status = ServiceStatus.unavailable(
                    report.message or self._message("ai_status_generic_error")
                )
        except ServiceUnavailable as e:
            logger.warning(f"AI service unreachable: {e}")
            status = ServiceStatus.unavailable(self._message("ai_status_failed"))
        except Exception as e:
            logger.exception(f"Unexpected error during health probe: {e}")
            status = ServiceStatus.unavailable(self._message("ai_status_failed"))

        logger.info(f"AI service status: {status.kind.value}")
        return self._apply(None, lambda s: transitions.finish_status_check(s, status), "status")

    def _run_predict(self, generation: int, image: ImageFile, language: str) -> Session:
        try:
            prediction = self._client.predict(image, language)
            outcome = Submission.succeeded(
                Diagnosis(disease_label=prediction.disease, confidence_percent=prediction.confidence)
            )
            logger.info(f"Diagnosis: {prediction.disease} ({prediction.confidence:.2f}%)")
        except ApplicationError as e:
            logger.warning(f"Service rejected image {image.name}: {e}")
            outcome = Submission.failed(str(e))
        except PlantServiceError as e:
            logger.warning(f"Prediction request failed: {e}")
            outcome = Submission.failed(self._message("prediction_error"))
        except Exception as e:
            logger.exception(f"Unexpected error during prediction: {e}")
            outcome = Submission.failed(self._message("prediction_error"))

        return self._apply(generation, lambda s: transitions.finish_submission(s, outcome), "prediction")

    def _run_treatment(self, generation: int, disease: str, language: str) -> Session:
        try:
            outcome = Treatment.available(self._client.treatment(disease, language))
        except ApplicationError as e:
            logger.warning(f"Service returned an error for treatment of {disease}: {e}")
            outcome = Treatment.failed(str(e))
        except IncompleteResponse as e:
            logger.warning(f"Treatment response incomplete: {e}")
            outcome = Treatment.failed(self._message("treatment_error"))
        except RequestFailed as e:
            logger.warning(f"Treatment request failed: {e}")
            outcome = Treatment.failed(f"Error: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error during treatment request: {e}")
            outcome = Treatment.failed(f"Error: {e}")

        return self._apply(generation, lambda s: transitions.finish_treatment(s, outcome), "treatment")
