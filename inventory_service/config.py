"""Inventory Service Configuration"""
from pydantic_settings import SettingsConfigDict

from inventory_service.common_config import CommonSettings


class Settings(CommonSettings):
    """Inventory Service specific settings"""
    
    service_name: str = "inventory-service"
    otel_service_name: str = "inventory-service"
    
    host: str = "0.0.0.0"
    port: int = 8080
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
