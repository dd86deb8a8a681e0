"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: service methods return a ServiceResult for user-input failures
instead of raising.  The CLI renders it; ``--json`` serializes it as-is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured failure payload: stable code plus human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every calendar service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"now"``, ``"convert"``, ``"diff"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry in verbose mode).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
