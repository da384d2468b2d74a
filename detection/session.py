"""Session state for one plant disease detection attempt.

The ``Session`` is an immutable value. Every change goes through one of the
pure transition functions at the bottom of this module, which take a session
and return a new one; ``DetectionSessionController`` is the only caller that
stores the result.

``generation`` is bumped whenever an earlier in-flight predict or treatment
result must stop applying: on every image change and every new submission.
Background completions carry the generation they were started under and are
discarded when it no longer matches.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from plant_api.base import ImageFile


# ---------------------------------------------------------------------------
# Tagged states
# ---------------------------------------------------------------------------

class StatusKind(str, Enum):
    UNKNOWN = "unknown"
    CHECKING = "checking"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class SubmissionKind(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TreatmentKind(str, Enum):
    NOT_REQUESTED = "not_requested"
    LOADING = "loading"
    AVAILABLE = "available"
    FAILED = "failed"


@dataclass(frozen=True)
class Diagnosis:
    disease_label: str
    confidence_percent: float


@dataclass(frozen=True)
class ServiceStatus:
    kind: StatusKind = StatusKind.UNKNOWN
    message: str | None = None

    @classmethod
    def unknown(cls) -> "ServiceStatus":
        return cls()

    @classmethod
    def checking(cls) -> "ServiceStatus":
        return cls(StatusKind.CHECKING)

    @classmethod
    def available(cls, message: str) -> "ServiceStatus":
        return cls(StatusKind.AVAILABLE, message)

    @classmethod
    def unavailable(cls, message: str) -> "ServiceStatus":
        return cls(StatusKind.UNAVAILABLE, message)

    @property
    def is_checking(self) -> bool:
        return self.kind is StatusKind.CHECKING

    @property
    def is_available(self) -> bool:
        return self.kind is StatusKind.AVAILABLE


@dataclass(frozen=True)
class Submission:
    kind: SubmissionKind = SubmissionKind.IDLE
    diagnosis: Diagnosis | None = None
    error: str | None = None

    @classmethod
    def idle(cls) -> "Submission":
        return cls()

    @classmethod
    def submitting(cls) -> "Submission":
        return cls(SubmissionKind.SUBMITTING)

    @classmethod
    def succeeded(cls, diagnosis: Diagnosis) -> "Submission":
        return cls(SubmissionKind.SUCCEEDED, diagnosis=diagnosis)

    @classmethod
    def failed(cls, error: str) -> "Submission":
        return cls(SubmissionKind.FAILED, error=error)

    @property
    def is_idle(self) -> bool:
        return self.kind is SubmissionKind.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.kind is SubmissionKind.SUBMITTING

    @property
    def is_succeeded(self) -> bool:
        return self.kind is SubmissionKind.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.kind is SubmissionKind.FAILED


@dataclass(frozen=True)
class Treatment:
    kind: TreatmentKind = TreatmentKind.NOT_REQUESTED
    text: str | None = None
    error: str | None = None

    @classmethod
    def not_requested(cls) -> "Treatment":
        return cls()

    @classmethod
    def loading(cls) -> "Treatment":
        return cls(TreatmentKind.LOADING)

    @classmethod
    def available(cls, text: str) -> "Treatment":
        return cls(TreatmentKind.AVAILABLE, text=text)

    @classmethod
    def failed(cls, error: str) -> "Treatment":
        return cls(TreatmentKind.FAILED, error=error)

    @property
    def is_not_requested(self) -> bool:
        return self.kind is TreatmentKind.NOT_REQUESTED

    @property
    def is_loading(self) -> bool:
        return self.kind is TreatmentKind.LOADING


@dataclass(frozen=True)
class Session:
    """Everything the UI needs to render one detection attempt."""

    selected_image: ImageFile | None = None
    preview_url: str | None = None
    service_status: ServiceStatus = ServiceStatus()
    submission: Submission = Submission()
    treatment: Treatment = Treatment()
    error: str | None = None
    locale: str = "en"
    generation: int = 0


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def start_status_check(session: Session) -> Session:
    return replace(session, service_status=ServiceStatus.checking())


def finish_status_check(session: Session, status: ServiceStatus) -> Session:
    return replace(session, service_status=status)


def select_image(session: Session, image: ImageFile, preview_url: str) -> Session:
    """Store a new image and drop every result derived from the previous one."""
    return replace(
        session,
        selected_image=image,
        preview_url=preview_url,
        submission=Submission.idle(),
        treatment=Treatment.not_requested(),
        error=None,
        generation=session.generation + 1,
    )


def clear_image(session: Session) -> Session:
    return replace(
        session,
        selected_image=None,
        preview_url=None,
        submission=Submission.idle(),
        treatment=Treatment.not_requested(),
        error=None,
        generation=session.generation + 1,
    )


def reject_submission(session: Session, message: str) -> Session:
    return replace(session, error=message)


def start_submission(session: Session) -> Session:
    if session.selected_image is None or session.submission.is_submitting:
        raise ValueError("submission cannot start without an image or while one is running")
    return replace(
        session,
        submission=Submission.submitting(),
        treatment=Treatment.not_requested(),
        error=None,
        generation=session.generation + 1,
    )


def finish_submission(session: Session, outcome: Submission) -> Session:
    if not session.submission.is_submitting:
        return session
    if outcome.kind not in (SubmissionKind.SUCCEEDED, SubmissionKind.FAILED):
        raise ValueError(f"submission must settle as succeeded or failed, got {outcome.kind}")
    return replace(session, submission=outcome, error=None)


def start_treatment(session: Session) -> Session:
    # treatment only leaves NOT_REQUESTED on top of a successful diagnosis
    if not session.submission.is_succeeded:
        return session
    return replace(session, treatment=Treatment.loading())


def finish_treatment(session: Session, outcome: Treatment) -> Session:
    if not (session.submission.is_succeeded and session.treatment.is_loading):
        return session
    return replace(session, treatment=outcome)


def set_locale(session: Session, locale: str) -> Session:
    return replace(session, locale=locale)
