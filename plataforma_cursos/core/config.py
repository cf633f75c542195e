"""
Configuration module for the Plataforma de Cursos backend
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Application settings
    app_name: str = "Plataforma de cursos"
    app_version: str = "1.0.0"
    environment: str = "dev"
    debug: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8080

    # Rutas base (el gate construye sus reglas a partir de estos prefijos)
    api_v1_str: str = "/api/v1"
    actuator_base_path: str = "/actuator"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


__all__ = ["Settings", "get_settings"]
