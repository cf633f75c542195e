import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from plataforma_cursos.core.errors import AuthenticationRequired, error_response
from plataforma_cursos.core.security import AuthorizationGate, extract_credential

logger = structlog.get_logger("plataforma_cursos.gate")


class AuthorizationGateMiddleware(BaseHTTPMiddleware):
    """
    Runs the authorization gate before routing.

    A rejected request is answered here and never reaches the router, so an
    unknown non-public path gets 401 rather than 404.
    """

    def __init__(self, app: ASGIApp, gate: AuthorizationGate):
        super().__init__(app)
        self.gate = gate

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        path = request.url.path
        credential = extract_credential(request.headers.get("Authorization"))

        try:
            self.gate.authorize(path, credential)
        except AuthenticationRequired as exc:
            logger.info(
                "Request rejected",
                method=request.method,
                path=path,
                credential_present=credential is not None,
            )
            return error_response(exc)

        logger.debug("Request admitted", method=request.method, path=path)
        return await call_next(request)
