from .base import (  # noqa: F401
    HealthReport,
    ImageFile,
    PlantServiceClient,
    Prediction,
    get_client,
)
from .errors import (  # noqa: F401
    ApplicationError,
    IncompleteResponse,
    PlantServiceError,
    RequestFailed,
    ServiceUnavailable,
    ValidationError,
)
from .http import HttpPlantServiceClient  # noqa: F401

__all__ = [
    "ApplicationError",
    "HealthReport",
    "HttpPlantServiceClient",
    "ImageFile",
    "IncompleteResponse",
    "PlantServiceClient",
    "PlantServiceError",
    "Prediction",
    "RequestFailed",
    "ServiceUnavailable",
    "ValidationError",
    "get_client",
]
