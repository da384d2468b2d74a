import sys
import threading
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from detection import DetectionSessionController
from plant_api import HealthReport, ImageFile, PlantServiceClient, Prediction


class FakePlantClient(PlantServiceClient):
    """In-memory stand-in for the inference service.

    Each behaviour is either a value to return or an exception to raise.
    Setting a ``*_gate`` event makes the matching call block until it is set.
    """

    def __init__(self):
        self.health = HealthReport(ok=True)
        self.prediction = Prediction(disease="Leaf Blight", confidence=92.5)
        self.treatment_text = "Remove infected leaves and apply copper fungicide."
        self.predict_gate: threading.Event | None = None
        self.treatment_gate: threading.Event | None = None
        self.health_calls = 0
        self.predict_calls = []
        self.treatment_calls = []

    @staticmethod
    def _resolve(value):
        if isinstance(value, BaseException):
            raise value
        return value

    def check_health(self):
        self.health_calls += 1
        return self._resolve(self.health)

    def predict(self, image, language):
        self.predict_calls.append((image, language))
        if self.predict_gate is not None:
            self.predict_gate.wait(timeout=5)
        return self._resolve(self.prediction)

    def treatment(self, disease_name, language):
        self.treatment_calls.append((disease_name, language))
        if self.treatment_gate is not None:
            self.treatment_gate.wait(timeout=5)
        return self._resolve(self.treatment_text)


@pytest.fixture
def fake_client():
    return FakePlantClient()


@pytest.fixture
def controller(fake_client):
    ctrl = DetectionSessionController(fake_client, locale="en")
    yield ctrl
    ctrl.shutdown()


@pytest.fixture
def leaf_image():
    return ImageFile(name="leaf.jpg", content=b"\xff\xd8\xff\xe0fake-jpeg", mime_type="image/jpeg")


@pytest.fixture
def other_image():
    return ImageFile(name="stem.png", content=b"\x89PNGfake", mime_type="image/png")
