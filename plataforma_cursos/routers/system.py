from fastapi import APIRouter

from plataforma_cursos.schemas.system import InfoResponse, PingResponse

router = APIRouter()


@router.get("/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    """Endpoint de ping para verificar que la API está funcionando."""
    return PingResponse()


@router.get("/info", response_model=InfoResponse)
async def info() -> InfoResponse:
    return InfoResponse()
