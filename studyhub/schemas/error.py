"""Error body schema."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str


def error_responses(*status_codes: int) -> dict[int, dict]:
    """OpenAPI ``responses=`` entries documenting the error body."""
    return {code: {"model": ErrorResponse} for code in status_codes}
