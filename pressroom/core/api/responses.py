from __future__ import annotations

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(
    message: str,
    data: Any = None,
    *,
    status: int = http_status.HTTP_200_OK,
) -> Response:
    """
    Build the ``{code, message, data}`` body used by write operations.

    ``data`` is omitted entirely when None (e.g. after a delete).
    """
    payload: dict[str, Any] = {"code": status, "message": str(message)}
    if data is not None:
        payload["data"] = data
    return Response(payload, status=status)
