"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    def describe(self) -> str:
        """Human-readable one-line description."""
        if self.status_code is None:
            return self.reason
        generic = f"HTTP {self.status_code}"
        if self.reason == generic:
            return generic
        return f"{generic} ({self.reason})"
