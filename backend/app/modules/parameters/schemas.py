from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ParametersUpdate(BaseModel):
    # Left untyped so a non-object patch reaches the store and is reported as
    # InvalidFormat instead of a generic validation error
    parameters: Any = None


class ParameterDelete(BaseModel):
    key: str | None = None


class ParameterDeleteResponse(BaseModel):
    message: str
    parameters: dict[str, Any]
