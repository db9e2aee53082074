"""
Envelope returned by every endpoint that completes normally.

``ok`` is false only for the ``Empty`` outcome of the list endpoints;
every other rejection is reported as an HTTP error (see
``api.v1.endpoints.common``).
"""

from typing import Any, Optional

from pydantic import BaseModel


class OperationResponse(BaseModel):
    ok: bool = True
    message: str
    error: Optional[str] = None
    data: Any = None
