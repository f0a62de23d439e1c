import threading
from fastapi import Depends
from dashboard.core.config import Settings, get_settings
from dashboard.core.stats import ClassificationStats
from dashboard.controller import ClassificationController
from dashboard.services.classifier import ClassifierService

# Module-level singletons (lazy-initialized, thread-safe)
_controller: ClassificationController | None = None
_stats: ClassificationStats | None = None
_lock = threading.Lock()


def get_stats() -> ClassificationStats:
    global _stats
    if _stats is None:
        with _lock:
            if _stats is None:  # double-check after acquiring lock
                _stats = ClassificationStats()
    return _stats


def get_controller(
    settings: Settings = Depends(get_settings),
    stats: ClassificationStats = Depends(get_stats),
) -> ClassificationController:
    # One controller per process: the dashboard is a single-user form.
    global _controller
    if _controller is None:
        with _lock:
            if _controller is None:  # double-check after acquiring lock
                _controller = ClassificationController(ClassifierService(settings), stats)
    return _controller
