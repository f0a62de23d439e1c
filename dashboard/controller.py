"""
Classification controller.

Owns the input text and the request state (idle / loading / success /
failure) and is the only place either is mutated. Views read `state`,
`text` and `loading`, forward edits through `set_text`, and trigger
classification with `submit`.

Overlapping submits are not cancelled: both requests run and whichever
resolves last sets the final state. Views are expected to disable the
submit control while `loading` is true.
"""
import time
import logging
from typing import Callable
from dashboard.schemas import RequestState, Idle, Loading, Success, Failure
from dashboard.services.classifier import ClassifierService, ClassifierError
from dashboard.core.stats import ClassificationStats, EMPTY_INPUT, UNEXPECTED

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter some text to classify"
CLASSIFICATION_FAILED_MESSAGE = "Classification failed. Please check your API server."

Subscriber = Callable[[RequestState], None]


class ClassificationController:
    def __init__(self, classifier: ClassifierService, stats: ClassificationStats | None = None):
        self.classifier = classifier
        self.stats = stats
        self.text = ""
        self.state: RequestState = Idle()
        self._subscribers: list[Subscriber] = []

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    def set_text(self, text: str):
        self.text = text

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Registers callback for every state transition. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _transition(self, state: RequestState):
        self.state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception(f"State subscriber {callback!r} failed")

    async def submit(self, text: str | None = None) -> RequestState:
        """
        Runs one classification attempt and returns the terminal state.

        Empty or whitespace-only input fails locally without touching the
        network. Every other failure (unreachable server, non-2xx status,
        unparseable body, anything unexpected) collapses into one generic
        message; the real cause only goes to the log.
        """
        if text is not None:
            self.text = text

        if not self.text.strip():
            if self.stats:
                self.stats.record_failure(EMPTY_INPUT)
            terminal = Failure(message=EMPTY_INPUT_MESSAGE)
            self._transition(terminal)
            return terminal

        self._transition(Loading())
        t0 = time.time()

        try:
            result = await self.classifier.classify(self.text)
        except ClassifierError as e:
            logger.warning(f"Classification failed ({e.kind}): {e}")
            if self.stats:
                self.stats.record_failure(e.kind, _elapsed_ms(t0))
            terminal = Failure(message=CLASSIFICATION_FAILED_MESSAGE)
        except Exception:
            logger.exception("Unexpected error during classification")
            if self.stats:
                self.stats.record_failure(UNEXPECTED, _elapsed_ms(t0))
            terminal = Failure(message=CLASSIFICATION_FAILED_MESSAGE)
        else:
            logger.info(f"Classified as {result.category!r} (confidence {result.confidence:.4f})")
            if self.stats:
                self.stats.record_success(result.category, result.confidence, _elapsed_ms(t0))
            terminal = Success(result=result)

        # Last attempt to resolve wins; an older one may land after a newer one.
        self._transition(terminal)
        return terminal


def _elapsed_ms(t0: float) -> float:
    return (time.time() - t0) * 1000
