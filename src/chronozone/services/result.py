"""ServiceResult and ServiceError: what every TimeService operation returns.

INVARIANT: service operations never raise for zone problems; they return
``ServiceResult(ok=False)`` carrying the domain exception's code.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from chronozone.domain.errors import ChronozoneError, InvalidLocalTime, TimezoneNotFound


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ChronozoneError) -> ServiceError:
        """Carry the exception's code, message, and the zone/reading it names."""
        detail: dict[str, Any] = {}
        if isinstance(exc, (TimezoneNotFound, InvalidLocalTime)):
            detail["timezone_id"] = exc.timezone_id
        if isinstance(exc, InvalidLocalTime):
            detail["local_datetime"] = exc.local_datetime.isoformat()
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"diff"``, ``"convert"``, ``"now"``, ``"compare"``).
        data: Operation-specific payload on success.
        warnings: Notes about how the inputs were interpreted.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], warnings: Iterable[str] = ()) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=list(warnings))

    @classmethod
    def failure(cls, op: str, exc: ChronozoneError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
