import json
import logging
import httpx
from pydantic import ValidationError
from dashboard.schemas import ClassifyRequest, ClassificationResult
from dashboard.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Unknown"
DEFAULT_CONFIDENCE = 0.95

# Failure kinds, kept apart in stats but shown to the user as one message.
NETWORK = "network"
HTTP_STATUS = "http_status"
BAD_BODY = "bad_body"


class ClassifierError(Exception):
    """Raised for any failure talking to the classification service."""
    def __init__(self, message: str, kind: str = BAD_BODY):
        super().__init__(message)
        self.kind = kind


def _reject_constant(token: str):
    # json.loads accepts NaN/Infinity/-Infinity; strict JSON does not.
    raise ValueError(f"Non-standard JSON constant {token!r}")


def normalize_response(data) -> ClassificationResult:
    """
    Turns a decoded response body into a ClassificationResult.

    category falls back from 'category' to 'prediction' to 'Unknown';
    confidence falls back to 0.95. Both fallbacks trigger on falsy values,
    so a reported confidence of 0 is replaced too.
    """
    if not isinstance(data, dict):
        raise ClassifierError(f"Expected a JSON object, got {type(data).__name__}")

    category = data.get("category") or data.get("prediction") or DEFAULT_CATEGORY
    confidence = data.get("confidence") or DEFAULT_CONFIDENCE

    try:
        return ClassificationResult(category=category, confidence=confidence)
    except ValidationError as e:
        raise ClassifierError(f"Unexpected response shape: {e.error_count()} error(s)") from e


class ClassifierService:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.url = settings.CLASSIFIER_URL
        self.timeout = settings.CLASSIFIER_TIMEOUT
        # Injected in tests (httpx.MockTransport); None means real network.
        self.transport = transport

    async def classify(self, text: str) -> ClassificationResult:
        """POSTs {"text": ...} to the classifier. One request, no retries."""
        payload = ClassifyRequest(text=text).model_dump()

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise ClassifierError(f"Request to {self.url} failed: {type(e).__name__}: {e}", kind=NETWORK) from e

        if not response.is_success:
            raise ClassifierError(f"Classifier returned HTTP {response.status_code}", kind=HTTP_STATUS)

        try:
            data = json.loads(response.content, parse_constant=_reject_constant)
        except ValueError as e:
            raise ClassifierError(f"Classifier returned a non-JSON body: {e}") from e

        return normalize_response(data)
