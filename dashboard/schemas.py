from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field


class ClassifyRequest(BaseModel):
    """
    Body sent to the classification service.
    The text is forwarded exactly as typed (no trimming).
    """
    text: str = Field(..., description="Raw news article text.")


class ClassificationResult(BaseModel):
    """
    Normalized classifier answer.
    Confidence is expected in [0, 1] but only finiteness is enforced.
    """
    category: str = Field(..., description="Predicted category label (e.g. 'Sports').")
    confidence: float = Field(..., allow_inf_nan=False, description="Classifier-reported confidence (finite).")


# ── Request state ───────────────────────────────────────────────────
class Idle(BaseModel):
    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    status: Literal["loading"] = "loading"


class Success(BaseModel):
    status: Literal["success"] = "success"
    result: ClassificationResult


class Failure(BaseModel):
    status: Literal["failure"] = "failure"
    message: str


RequestState = Annotated[
    Union[Idle, Loading, Success, Failure],
    Field(discriminator="status"),
]


# ── Dashboard API ───────────────────────────────────────────────────
class SubmitRequest(BaseModel):
    """
    Payload for POST /api/classify.
    No length checks here: empty input is the controller's call.
    """
    text: str = ""


class StateResponse(BaseModel):
    text: str = Field(..., description="Current content of the input field.")
    loading: bool = Field(..., description="True while a classification is in flight.")
    state: RequestState
