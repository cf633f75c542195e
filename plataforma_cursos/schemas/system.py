from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

# El orden de los campos es el orden de las claves en el JSON


class PingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str = "ok"
    message: str = "pong"


class InfoResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Plataforma de cursos"
    version: str = "1.0.0"
    description: str = "Plataforma privada de cursos offline"


# --- ACTUATOR ---

class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str = "UP"


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    templated: bool = False


class ActuatorIndexResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    links: Dict[str, Link] = Field(..., alias="_links")
