"""Streamlit UI for plant disease detection."""
from __future__ import annotations

import streamlit as st

from config import Settings
from detection import DetectionSessionController, LANGUAGE_NAMES, StatusKind, TreatmentKind, locale_index
from detection.view import can_request_treatment, can_submit, format_confidence, show_examples
from plant_api import ImageFile

TIPS = [
    "Take clear, well-lit photos",
    "Focus on the diseased part of the plant",
    "Make sure the image is not blurry",
    "Try multiple angles if the first result looks wrong",
]


def _get_controller(settings: Settings) -> DetectionSessionController:
    """One controller per browser session, started once."""
    if "detection_controller" not in st.session_state:
        controller = DetectionSessionController.from_settings(settings)
        controller.initialize()
        st.session_state.detection_controller = controller
        st.session_state.detection_upload_id = None
    return st.session_state.detection_controller


def _sync_upload(controller: DetectionSessionController, uploaded) -> None:
    """Forward a newly chosen file to the controller exactly once."""
    upload_id = getattr(uploaded, "file_id", None) or (uploaded.name if uploaded else None)
    if upload_id == st.session_state.detection_upload_id:
        return
    st.session_state.detection_upload_id = upload_id
    if uploaded is None:
        controller.clear_image()
        return
    controller.select_image(
        ImageFile(
            name=uploaded.name,
            content=uploaded.getvalue(),
            mime_type=uploaded.type or "application/octet-stream",
        )
    )


def _render_status(controller: DetectionSessionController) -> None:
    status = controller.session.service_status
    if status.kind is StatusKind.CHECKING:
        with st.spinner("Checking AI service..."):
            status = controller.wait_for_status_check().service_status

    if status.kind is StatusKind.AVAILABLE:
        st.success(f"✅ {status.message}")
    elif status.kind is StatusKind.UNAVAILABLE:
        st.error(f"🐞 {status.message}")
        if st.button("🔄 Check again", key="dd_recheck"):
            controller.check_service_status()
            st.rerun()


def _render_result(controller: DetectionSessionController) -> None:
    session = controller.session
    diagnosis = session.submission.diagnosis
    st.markdown("### 🔍 Result")
    col1, col2 = st.columns(2)
    col1.metric("Disease", diagnosis.disease_label)
    col2.metric("Confidence", format_confidence(diagnosis))

    if st.button(
        "💊 Treatment Solution",
        key="dd_treatment",
        disabled=not can_request_treatment(session),
    ):
        future = controller.request_treatment()
        if future is not None:
            with st.spinner("Loading treatment..."):
                future.result()

    treatment = controller.session.treatment
    if treatment.kind is TreatmentKind.AVAILABLE:
        st.markdown("#### Treatment")
        st.markdown(treatment.text)
    elif treatment.kind is TreatmentKind.FAILED:
        st.error(treatment.error)

    if st.button("🔄 Try another image", key="dd_retry"):
        controller.clear_image()
        st.rerun()


def render_disease_detection(settings: Settings):
    st.header("🌿 Plant Disease Detection")

    controller = _get_controller(settings)

    with st.sidebar:
        locale = st.selectbox(
            "Language",
            list(LANGUAGE_NAMES),
            index=locale_index(settings.locale),
            format_func=LANGUAGE_NAMES.get,
            key="dd_locale",
        )
    controller.set_locale(locale)

    _render_status(controller)

    uploaded = st.file_uploader("Upload a plant image", type=["jpg", "jpeg", "png"], key="dd_upload")
    _sync_upload(controller, uploaded)

    session = controller.session
    if session.preview_url:
        preview = controller.previews.get(session.preview_url)
        st.image(preview.content, caption=preview.name)
        if st.button("🗑️ Delete image", key="dd_delete"):
            controller.clear_image()
            st.rerun()

    if st.button("🔬 Analyze", key="dd_analyze", disabled=not can_submit(session)):
        future = controller.submit_for_diagnosis()
        if future is not None:
            with st.spinner("Analyzing..."):
                future.result()

    session = controller.session
    if session.error:
        st.error(session.error)
    if session.submission.is_failed:
        st.error(session.submission.error)
    elif session.submission.is_succeeded:
        _render_result(controller)
    elif show_examples(session):
        st.markdown("### 💡 Tips for best results")
        for tip in TIPS:
            st.markdown(f"- {tip}")
    elif session.selected_image is None and not session.service_status.is_available:
        st.info("Select an image once the AI service is available.")
