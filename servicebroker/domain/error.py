from pydantic import BaseModel, ConfigDict


class ErrorMessage(BaseModel):
    """Body returned to the platform when a request fails.

    Attributes:
        error: Machine readable error code (``AsyncRequired``,
            ``ConcurrencyError``, ``RequiresApp``), if any.
        description: Human readable description of the failure.
    """

    model_config = ConfigDict(frozen=True)

    error: str | None = None
    description: str | None = None

    def to_body(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)
