import logging
from pathlib import Path
from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends, Form, Request
from fastapi.responses import JSONResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from dashboard.schemas import SubmitRequest, StateResponse
from dashboard.core.config import get_settings, Settings
from dashboard.core.stats import ClassificationStats, SERVER_ERROR
from dashboard.api.dependencies import get_controller, get_stats
from dashboard.controller import ClassificationController
from dashboard.view import page_context

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"🟢 Ready to serve, classifier={settings.CLASSIFIER_URL}, timeout={settings.CLASSIFIER_TIMEOUT}s")
    yield


app = FastAPI(
    title=get_settings().APP_NAME,
    description="Paste a news article and get its category from the classification service.",
    version=get_settings().APP_VERSION,
    lifespan=lifespan,
)


def _state_response(controller: ClassificationController) -> StateResponse:
    return StateResponse(text=controller.text, loading=controller.loading, state=controller.state)


# ── Page ───────────────────────────────────────────────────────────
@app.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    controller: ClassificationController = Depends(get_controller),
):
    return templates.TemplateResponse(request, "index.html", page_context(controller))


@app.post("/", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    text: str = Form(""),
    controller: ClassificationController = Depends(get_controller),
):
    """
    Form post from the page: classify, then re-render with the outcome.

    The response is only rendered once the attempt has resolved, so the
    submitting browser never sees the "Classifying…" label. Only a GET /
    or /api/state issued while the request is in flight reports loading.
    """
    await controller.submit(text)
    return templates.TemplateResponse(request, "index.html", page_context(controller))


# ── JSON API ───────────────────────────────────────────────────────
@app.get("/api/state", response_model=StateResponse)
def get_state(controller: ClassificationController = Depends(get_controller)):
    return _state_response(controller)


@app.post("/api/classify", response_model=StateResponse)
async def classify(
    body: SubmitRequest,
    controller: ClassificationController = Depends(get_controller),
):
    """
    Same lifecycle as the form. Empty input comes back as a 'failure'
    state with HTTP 200, not a 422.
    """
    await controller.submit(body.text)
    return _state_response(controller)


@app.get("/health")
def health(
    settings: Settings = Depends(get_settings),
    controller: ClassificationController = Depends(get_controller),
):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app_version": settings.APP_VERSION,
        "classifier_url": settings.CLASSIFIER_URL,
        "state": controller.state.status,
    }


@app.get("/metrics")
def metrics(
    settings: Settings = Depends(get_settings),
    stats: ClassificationStats = Depends(get_stats),
):
    """Outcomes by failure kind, confidence spread and classifier round-trip times."""
    return stats.snapshot(classifier_url=settings.CLASSIFIER_URL)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}")
    # Exception handlers get no Depends; resolve overrides by hand.
    stats_provider = request.app.dependency_overrides.get(get_stats, get_stats)
    stats_provider().record_failure(SERVER_ERROR)
    return JSONResponse(
        status_code=500,
        content={"message": f"Internal server error: {type(exc).__name__}"}
    )
