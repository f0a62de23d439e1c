"""
Unit Tests: classification service client + response normalization
"""
import asyncio
import httpx
import pytest
from dashboard.services.classifier import ClassifierService, ClassifierError, normalize_response
from dashboard.schemas import ClassificationResult


class TestNormalizeResponse:
    def test_category_preferred_over_prediction(self):
        result = normalize_response({"category": "Sports", "prediction": "Politics", "confidence": 0.5})
        assert result == ClassificationResult(category="Sports", confidence=0.5)

    def test_empty_category_falls_through_to_prediction(self):
        assert normalize_response({"category": "", "prediction": "Business"}).category == "Business"

    def test_null_fields_use_defaults(self):
        result = normalize_response({"category": None, "prediction": None, "confidence": None})
        assert result == ClassificationResult(category="Unknown", confidence=0.95)

    def test_extra_fields_ignored(self):
        result = normalize_response({"category": "Health", "confidence": 0.7, "probabilities": [0.1, 0.7]})
        assert result == ClassificationResult(category="Health", confidence=0.7)

    @pytest.mark.parametrize("body", [[], ["Sports"], "Sports", 3, None])
    def test_non_object_rejected(self, body):
        with pytest.raises(ClassifierError):
            normalize_response(body)

    def test_non_string_category_rejected(self):
        with pytest.raises(ClassifierError):
            normalize_response({"category": 7})

    def test_non_numeric_confidence_rejected(self):
        with pytest.raises(ClassifierError):
            normalize_response({"category": "Sports", "confidence": "very sure"})

    @pytest.mark.parametrize("confidence", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_confidence_rejected(self, confidence):
        with pytest.raises(ClassifierError):
            normalize_response({"category": "Sports", "confidence": confidence})


class TestClassifierService:
    def test_posts_to_configured_url(self, settings, service, fake_classifier):
        asyncio.run(service.classify("ዜና"))
        request = fake_classifier.requests[0]
        assert str(request.url) == settings.CLASSIFIER_URL
        assert request.method == "POST"

    def test_non_success_status_raises(self, service, fake_classifier):
        fake_classifier.respond(502)
        with pytest.raises(ClassifierError, match="HTTP 502"):
            asyncio.run(service.classify("text"))

    def test_redirect_status_is_not_success(self, service, fake_classifier):
        fake_classifier.respond(302, headers={"location": "http://elsewhere.test/"})
        with pytest.raises(ClassifierError):
            asyncio.run(service.classify("text"))

    def test_transport_error_wrapped(self, service, fake_classifier):
        fake_classifier.fail(httpx.ConnectError)
        with pytest.raises(ClassifierError) as exc_info:
            asyncio.run(service.classify("text"))
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_invalid_json_wrapped(self, service, fake_classifier):
        fake_classifier.respond(200, content=b"{not json")
        with pytest.raises(ClassifierError, match="non-JSON"):
            asyncio.run(service.classify("text"))

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_json_constants_rejected(self, service, fake_classifier, token):
        body = f'{{"category": "Sports", "confidence": {token}}}'.encode()
        fake_classifier.respond(200, content=body, headers={"content-type": "application/json"})
        with pytest.raises(ClassifierError, match="non-JSON") as exc_info:
            asyncio.run(service.classify("text"))
        assert exc_info.value.kind == "bad_body"

    def test_failure_kinds(self, service, fake_classifier):
        fake_classifier.fail()
        with pytest.raises(ClassifierError) as exc_info:
            asyncio.run(service.classify("text"))
        assert exc_info.value.kind == "network"

        fake_classifier.respond(404)
        with pytest.raises(ClassifierError) as exc_info:
            asyncio.run(service.classify("text"))
        assert exc_info.value.kind == "http_status"
