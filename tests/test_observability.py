import json
import logging

import pytest
from opentelemetry.sdk.resources import DEPLOYMENT_ENVIRONMENT, SERVICE_NAME, SERVICE_VERSION

from inventory_service.common_instrumentation import build_resource, setup_opentelemetry
from inventory_service.common_logging import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def format_record(root, message):
    record = logging.LogRecord("inventory_service.api", logging.INFO, __file__, 1, message, None, None)
    return root.handlers[0].formatter.format(record)


def test_json_logs_carry_deployment_fields(root_logger):
    setup_logging("inventory-service", environment="staging", version="9.9.9")

    line = json.loads(format_record(root_logger, "Creating buyer"))

    assert line["message"] == "Creating buyer"
    assert line["level"] == "INFO"
    assert line["logger"] == "inventory_service.api"
    assert line["service"] == "inventory-service"
    assert line["environment"] == "staging"
    assert line["version"] == "9.9.9"


def test_text_logs_use_plain_formatter(root_logger):
    setup_logging("inventory-service", log_level="debug", log_format="text")

    assert root_logger.level == logging.DEBUG
    assert " - inventory_service.api - INFO - Listing buyers" in format_record(root_logger, "Listing buyers")


def test_adapter_carries_deployment_context(root_logger):
    adapter = setup_logging("inventory-service", environment="prod", version="1.2.3")

    assert adapter.extra == {"service": "inventory-service", "environment": "prod", "version": "1.2.3"}


def test_trace_resource_identifies_deployment():
    attributes = build_resource("inventory-service", environment="staging", version="9.9.9").attributes

    assert attributes[SERVICE_NAME] == "inventory-service"
    assert attributes[SERVICE_VERSION] == "9.9.9"
    assert attributes[DEPLOYMENT_ENVIRONMENT] == "staging"


def test_disabled_tracing_installs_nothing():
    assert setup_opentelemetry("inventory-service", enabled=False) is None
