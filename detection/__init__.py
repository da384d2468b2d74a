"""Client-side workflow for diagnosing plant diseases from a photo."""

from .controller import DetectionSessionController  # noqa: F401
from .locale import DEFAULT_LANGUAGE, LANGUAGE_NAMES, locale_index, resolve_language  # noqa: F401
from .preview import PreviewStore  # noqa: F401
from .session import (  # noqa: F401
    Diagnosis,
    ServiceStatus,
    Session,
    StatusKind,
    Submission,
    SubmissionKind,
    Treatment,
    TreatmentKind,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "DetectionSessionController",
    "Diagnosis",
    "LANGUAGE_NAMES",
    "PreviewStore",
    "ServiceStatus",
    "Session",
    "StatusKind",
    "Submission",
    "SubmissionKind",
    "Treatment",
    "TreatmentKind",
    "locale_index",
    "resolve_language",
]
