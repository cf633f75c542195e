from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from plataforma_cursos.core.config import Settings, get_settings
from plataforma_cursos.core.logging_config import configure_logging
from plataforma_cursos.core.security import AuthorizationGate, build_path_rules
from plataforma_cursos.middleware import AuthorizationGateMiddleware
from plataforma_cursos.routers import actuator, system

logger = structlog.get_logger("plataforma_cursos")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "🚀 Starting Plataforma de Cursos backend",
        version=settings.app_version,
        environment=settings.environment,
    )
    yield
    logger.info("🛑 Shutting down")


def create_app(settings: Optional[Settings] = None, gate: Optional[AuthorizationGate] = None) -> FastAPI:
    """
    Construye la aplicación de forma explícita: settings -> reglas -> gate -> app.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if gate is None:
        gate = AuthorizationGate(build_path_rules(settings))

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        default_response_class=JSONResponse,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gate = gate

    # =============================================================================
    # 🔐 AUTHORIZATION GATE (antes de cualquier ruta)
    # =============================================================================
    app.add_middleware(AuthorizationGateMiddleware, gate=gate)

    # =============================================================================
    # 🔌 ROUTERS
    # =============================================================================
    app.include_router(system.router, prefix=settings.api_v1_str.rstrip("/"), tags=["System"])
    app.include_router(actuator.router, prefix=settings.actuator_base_path.rstrip("/"), tags=["Actuator"])

    return app


app = create_app()
