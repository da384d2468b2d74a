"""Render predicates derived from a ``Session``."""

from __future__ import annotations

from .session import Diagnosis, Session


def can_submit(session: Session) -> bool:
    return session.selected_image is not None and not session.submission.is_submitting


def can_request_treatment(session: Session) -> bool:
    return session.submission.is_succeeded and not session.treatment.is_loading


def show_examples(session: Session) -> bool:
    """Example gallery is shown only while the service is up and nothing is in progress."""
    return (
        session.service_status.is_available
        and session.selected_image is None
        and session.error is None
    )


def format_confidence(diagnosis: Diagnosis) -> str:
    return f"{diagnosis.confidence_percent:.2f}%"
