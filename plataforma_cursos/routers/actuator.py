"""
Operational endpoints under the actuator base path.

Payloads follow the usual actuator defaults so existing health probes keep
working. Only health is exposed over HTTP.
"""
from fastapi import APIRouter, Request

from plataforma_cursos.schemas.system import ActuatorIndexResponse, HealthResponse, Link

router = APIRouter()


@router.get("", response_model=ActuatorIndexResponse, response_model_by_alias=True)
async def actuator_index(request: Request) -> ActuatorIndexResponse:
    base = str(request.url).split("?", 1)[0].rstrip("/")
    return ActuatorIndexResponse(
        links={
            "self": Link(href=base),
            "health": Link(href=f"{base}/health"),
            "health-path": Link(href=f"{base}/health/{{*path}}", templated=True),
        }
    )


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe (public)."""
    return HealthResponse()

