"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Error body returned to API clients."""

    model_config = ConfigDict(frozen=True)

    error: str
    code: str = "INTERNAL_ERROR"
