"""Error response body shared by every error path."""

import traceback
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from starlette.requests import Request

from src.app.core.errors.exceptions import AppError
from src.app.models.base import utc_now


class ErrorResponse(BaseModel):
    """Serialized error.

    Keys are camelCase on the wire (``correlationId``); optional keys are
    omitted when unset.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: Literal["error"] = "error"
    code: str
    message: str | list[str]
    context: dict[str, Any] | None = None
    timestamp: datetime = Field(default_factory=utc_now)
    path: str | None = None
    method: str | None = None
    correlation_id: str | None = None
    stack: str | None = None

    @classmethod
    def from_app_error(
        cls,
        error: AppError,
        request: Request | None = None,
        include_stack: bool = False,
    ) -> "ErrorResponse":
        return cls(
            code=error.code.value,
            message=error.message,
            context=error.context,
            timestamp=error.timestamp,
            path=request.url.path if request is not None else None,
            method=request.method if request is not None else None,
            stack=format_stack(error) if include_stack else None,
        )

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def format_stack(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
