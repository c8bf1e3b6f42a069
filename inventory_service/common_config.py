"""
Common configuration shared by the inventory service components
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class CommonSettings(BaseSettings):
    """Base settings"""
    
    # Application
    service_name: str = "inventory-service"
    environment: str = "dev"
    debug: bool = True
    
    # Database
    database_url: str = "sqlite:///./inventory.db"
    
    # OpenTelemetry
    otel_enabled: bool = False
    otel_endpoint: str = "http://localhost:4317"
    otel_service_name: Optional[str] = None
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    
    # Client-visible messages (en, pt_BR)
    locale: str = "en"
    
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
