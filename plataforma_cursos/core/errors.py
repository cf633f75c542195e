from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse


class PlataformaError(Exception):
    """Base exception for the backend."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal error"
    headers: Optional[dict] = None

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class AuthenticationRequired(PlataformaError):
    """Raised by the authorization gate when a request needs a valid credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Authentication required"
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        super().__init__(detail)


def error_response(exc: PlataformaError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )
