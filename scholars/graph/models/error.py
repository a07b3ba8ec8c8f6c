"""API error payload model."""

from pydantic import BaseModel, ConfigDict, model_validator


class ErrorBody(BaseModel):
    """Error object returned along a non-success status.

    Client errors carry an ``error`` key, server errors a ``message`` key.
    """

    error: str | None = None
    message: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="after")
    def validate_has_reason(self) -> "ErrorBody":
        """Require at least one of error or message."""
        if self.error is None and self.message is None:
            raise ValueError("error body must carry either `error` or `message`")
        return self

    def __str__(self) -> str:
        return self.error if self.error is not None else str(self.message)
