"""Tests for HttpPlantServiceClient against a stubbed ``requests``."""

import json

import pytest
import requests

from plant_api import (
    ApplicationError,
    HttpPlantServiceClient,
    ImageFile,
    IncompleteResponse,
    RequestFailed,
    ServiceUnavailable,
    get_client,
)
from plant_api import http as http_module

BASE = "http://plant.test"
IMAGE = ImageFile(name="leaf.jpg", content=b"jpeg-bytes", mime_type="image/jpeg")


def _response(status=200, payload=None, body=None, url=BASE):
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response.url = url
    response.encoding = "utf-8"
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    return response


class _Recorder:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


@pytest.fixture
def client():
    return HttpPlantServiceClient(base_url=BASE + "/", timeout=5)


def _patch(monkeypatch, method, result):
    recorder = _Recorder(result)
    monkeypatch.setattr(http_module.requests, method, recorder)
    return recorder


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

def test_health_success(client, monkeypatch):
    recorder = _patch(monkeypatch, "get", _response(payload={"status": "success"}))

    report = client.check_health()

    assert report.ok
    assert recorder.calls[0][0] == f"{BASE}/api/test-ai"
    assert recorder.calls[0][1]["timeout"] == 5


def test_health_other_status_carries_message(client, monkeypatch):
    _patch(monkeypatch, "get", _response(payload={"status": "error", "message": "model offline"}))

    report = client.check_health()

    assert not report.ok
    assert report.message == "model offline"


def test_health_non_2xx_is_not_ok(client, monkeypatch):
    _patch(monkeypatch, "get", _response(503, payload={"status": "success"}))

    assert not client.check_health().ok


def test_health_transport_error_raises_service_unavailable(client, monkeypatch):
    _patch(monkeypatch, "get", requests.ConnectionError("refused"))

    with pytest.raises(ServiceUnavailable):
        client.check_health()


def test_health_invalid_json_raises_service_unavailable(client, monkeypatch):
    _patch(monkeypatch, "get", _response(body=b"<html>down</html>"))

    with pytest.raises(ServiceUnavailable):
        client.check_health()


# ---------------------------------------------------------------------------
# Predict
# ---------------------------------------------------------------------------

def test_predict_sends_multipart_image_and_language(client, monkeypatch):
    recorder = _patch(monkeypatch, "post", _response(payload={"disease": "Leaf Blight", "confidence": 92.5}))

    prediction = client.predict(IMAGE, "Hindi")

    url, kwargs = recorder.calls[0]
    assert url == f"{BASE}/api/predict"
    assert kwargs["files"] == {"image": ("leaf.jpg", b"jpeg-bytes", "image/jpeg")}
    assert kwargs["data"] == {"language": "Hindi"}
    assert prediction.disease == "Leaf Blight"
    assert prediction.confidence == 92.5


def test_predict_error_field_raises_application_error(client, monkeypatch):
    _patch(monkeypatch, "post", _response(payload={"error": "unsupported image"}))

    with pytest.raises(ApplicationError, match="unsupported image"):
        client.predict(IMAGE, "English")


@pytest.mark.parametrize("error", [False, None, "", 0])
def test_predict_falsy_error_field_is_ignored(client, monkeypatch, error):
    _patch(monkeypatch, "post", _response(payload={"error": error, "disease": "Rust", "confidence": 80}))

    prediction = client.predict(IMAGE, "English")

    assert prediction.disease == "Rust"
    assert prediction.confidence == 80.0


def test_treatment_falsy_error_field_is_ignored(client, monkeypatch):
    _patch(monkeypatch, "post", _response(payload={"error": False, "treatment": "Water less often."}))

    assert client.treatment("Root Rot", "English") == "Water less often."


def test_predict_non_2xx_raises_request_failed(client, monkeypatch):
    _patch(monkeypatch, "post", _response(500, payload={"error": "trace"}))

    with pytest.raises(RequestFailed) as excinfo:
        client.predict(IMAGE, "English")
    assert excinfo.value.status_code == 500
    assert not isinstance(excinfo.value, ApplicationError)


def test_predict_transport_error_raises_request_failed(client, monkeypatch):
    _patch(monkeypatch, "post", requests.Timeout("timed out"))

    with pytest.raises(RequestFailed, match="timed out"):
        client.predict(IMAGE, "English")


@pytest.mark.parametrize("payload", [{}, {"disease": "Rust"}, {"confidence": 50}, {"disease": "Rust", "confidence": "high"}])
def test_predict_incomplete_payload(client, monkeypatch, payload):
    _patch(monkeypatch, "post", _response(payload=payload))

    with pytest.raises(IncompleteResponse):
        client.predict(IMAGE, "English")


def test_predict_non_object_payload(client, monkeypatch):
    _patch(monkeypatch, "post", _response(payload=["Leaf Blight"]))

    with pytest.raises(RequestFailed):
        client.predict(IMAGE, "English")


# ---------------------------------------------------------------------------
# Treatment
# ---------------------------------------------------------------------------

def test_treatment_sends_json_body(client, monkeypatch):
    recorder = _patch(monkeypatch, "post", _response(payload={"treatment": "Apply copper spray."}))

    text = client.treatment("Leaf Blight", "Hindi")

    url, kwargs = recorder.calls[0]
    assert url == f"{BASE}/api/treatment-solution"
    assert kwargs["json"] == {"disease_name": "Leaf Blight", "language": "Hindi"}
    assert text == "Apply copper spray."


def test_treatment_error_field(client, monkeypatch):
    _patch(monkeypatch, "post", _response(payload={"error": "unknown disease"}))

    with pytest.raises(ApplicationError, match="unknown disease"):
        client.treatment("Leaf Blight", "English")


def test_treatment_missing_text(client, monkeypatch):
    _patch(monkeypatch, "post", _response(payload={"status": "ok"}))

    with pytest.raises(IncompleteResponse):
        client.treatment("Leaf Blight", "English")


def test_treatment_transport_error(client, monkeypatch):
    _patch(monkeypatch, "post", requests.ConnectionError("connection reset"))

    with pytest.raises(RequestFailed, match="connection reset"):
        client.treatment("Leaf Blight", "English")


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def test_get_client_builds_http_client():
    client = get_client("http://other.test/", timeout=2)

    assert isinstance(client, HttpPlantServiceClient)
    assert client.base_url == "http://other.test"
    assert client.timeout == 2
