from dashboard.controller import ClassificationController
from dashboard.schemas import Success, Failure
from dashboard.styles import style_for

SUBMIT_LABEL = "Classify News"
LOADING_LABEL = "Classifying…"


def confidence_percent(confidence: float) -> str:
    return f"{confidence * 100:.1f}%"


def confidence_width(confidence: float) -> str:
    # Not clamped; out-of-range confidences render as-is.
    return f"{confidence * 100}%"


def page_context(controller: ClassificationController) -> dict:
    """
    Template context for index.html, derived from controller state only.

    The loading label and disabled button appear only on pages rendered
    while an attempt is in flight (a GET / from another tab, say); the
    form post itself renders after the attempt resolves.
    """
    state = controller.state
    result = state.result if isinstance(state, Success) else None
    error = state.message if isinstance(state, Failure) else None

    context = {
        "text": controller.text,
        "loading": controller.loading,
        "button_label": LOADING_LABEL if controller.loading else SUBMIT_LABEL,
        "error": error,
        "result": result,
        "style": style_for(result.category if result else ""),
    }
    if result:
        context["confidence_text"] = confidence_percent(result.confidence)
        context["confidence_width"] = confidence_width(result.confidence)
    return context
