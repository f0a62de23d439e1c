"""
Running statistics over classification attempts, served by /metrics.

Failures are counted by kind even though the user only ever sees one
generic message, so "server down" and "server returned garbage" can be
told apart from the dashboard side.
"""
import threading
from collections import Counter, deque
import numpy as np

EMPTY_INPUT = "empty_input"
UNEXPECTED = "unexpected"
SERVER_ERROR = "server_error"
SUCCESS = "success"

# Kinds that involved a call to the classifier.
ROUND_TRIP_OUTCOMES = (SUCCESS, "network", "http_status", "bad_body", UNEXPECTED)

CONFIDENCE_BINS = [0.0, 0.5, 0.7, 0.9, 1.0]


class ClassificationStats:
    def __init__(self, max_samples=5000):
        self._lock = threading.Lock()
        self.outcomes: Counter[str] = Counter()
        self.categories: Counter[str] = Counter()
        self.confidences: deque[float] = deque(maxlen=max_samples)
        self.round_trips_ms: deque[float] = deque(maxlen=max_samples)

    def record_success(self, category: str, confidence: float, round_trip_ms: float):
        with self._lock:
            self.outcomes[SUCCESS] += 1
            self.categories[category] += 1
            self.confidences.append(confidence)
            self.round_trips_ms.append(round_trip_ms)

    def record_failure(self, kind: str, round_trip_ms: float | None = None):
        with self._lock:
            self.outcomes[kind] += 1
            if round_trip_ms is not None:
                self.round_trips_ms.append(round_trip_ms)

    def snapshot(self, classifier_url="unknown") -> dict:
        with self._lock:
            attempts = sum(self.outcomes[k] for k in ROUND_TRIP_OUTCOMES)
            return {
                "classifier_url": classifier_url,
                "attempts": attempts,
                "success_rate": round(self.outcomes[SUCCESS] / max(attempts, 1), 4),
                "outcomes": dict(self.outcomes),
                "categories": dict(self.categories.most_common()),
                "confidence": _confidence_summary(self.confidences),
                "round_trip_ms": _round_trip_summary(self.round_trips_ms),
            }


def _confidence_summary(values) -> dict:
    if not values:
        return {"samples": 0}
    arr = np.asarray(values, dtype=float)
    in_range = arr[(arr >= 0.0) & (arr <= 1.0)]
    counts, _ = np.histogram(in_range, bins=CONFIDENCE_BINS)
    return {
        "samples": int(arr.size),
        "mean": round(float(arr.mean()), 4),
        "histogram": {
            f"{lo:.1f}-{hi:.1f}": int(n)
            for lo, hi, n in zip(CONFIDENCE_BINS[:-1], CONFIDENCE_BINS[1:], counts)
        },
        # Reported as-is by the classifier; nothing clamps them.
        "out_of_range": int(arr.size - in_range.size),
    }


def _round_trip_summary(values) -> dict:
    if not values:
        return {"samples": 0}
    arr = np.asarray(values, dtype=float)
    return {
        "samples": int(arr.size),
        "p50": round(float(np.percentile(arr, 50)), 2),
        "p95": round(float(np.percentile(arr, 95)), 2),
        "max": round(float(arr.max()), 2),
    }
