"""
Structured logging configuration
"""
import logging
import sys
from pythonjsonlogger import jsonlogger

from inventory_service import __version__


def log_context(service_name: str, environment: str, version: str) -> dict:
    """Fields added to every JSON log record"""
    return {"service": service_name, "environment": environment, "version": version}


def setup_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: str = "json",
    environment: str = "dev",
    version: str = __version__
):
    """
    Setup structured logging for the service

    JSON records carry the service, environment and version of the process.
    
    Args:
        service_name: Name of the service
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format (json or text)
        environment: Deployment environment (dev, staging, prod)
        version: Service version
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper()))
    
    # Remove existing handlers
    logger.handlers.clear()
    
    handler = logging.StreamHandler(sys.stdout)
    
    if log_format.lower() == "json":
        formatter = jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level"
            },
            static_fields=log_context(service_name, environment, version)
        )
        formatter.default_time_format = "%Y-%m-%dT%H:%M:%S"
        formatter.default_msec_format = "%s.%03dZ"
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    
    logging.info(f"Logging initialized for {service_name} {version} ({environment}) at level {log_level}")
    
    return logging.LoggerAdapter(logger, log_context(service_name, environment, version))
