import httpx
import pytest
from fastapi.testclient import TestClient
from dashboard.api.main import app
from dashboard.api.dependencies import get_controller, get_stats
from dashboard.core.config import Settings, get_settings
from dashboard.core.stats import ClassificationStats
from dashboard.controller import ClassificationController
from dashboard.services.classifier import ClassifierService

CLASSIFIER_URL = "http://classifier.test/classify"


class FakeClassifier:
    """
    Stand-in for the remote classification service.
    Records every request and answers with the configured handler.
    """
    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(200, json={"category": "Sports", "confidence": 0.82})

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.handler(request)

    def respond(self, *args, **kwargs):
        self.handler = lambda request: httpx.Response(*args, **kwargs)

    def fail(self, exc_type=httpx.ConnectError):
        def handler(request):
            raise exc_type("connection refused", request=request)
        self.handler = handler


@pytest.fixture
def settings():
    return Settings(CLASSIFIER_URL=CLASSIFIER_URL, CLASSIFIER_TIMEOUT=1.0, _env_file=None)


@pytest.fixture
def fake_classifier():
    return FakeClassifier()


@pytest.fixture
def stats():
    return ClassificationStats()


@pytest.fixture
def service(settings, fake_classifier):
    return ClassifierService(settings, transport=httpx.MockTransport(fake_classifier))


@pytest.fixture
def controller(service, stats):
    return ClassificationController(service, stats)


@pytest.fixture
def client(settings, controller, stats):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_controller] = lambda: controller
    app.dependency_overrides[get_stats] = lambda: stats
    yield TestClient(app)
    app.dependency_overrides = {}
