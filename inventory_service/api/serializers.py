"""Response envelopes"""
import dataclasses
from datetime import datetime
from typing import Any, Dict, Iterable

from inventory_service.core.validation import DATETIME_FORMAT


def serialize(entity) -> Dict[str, Any]:
    """Entity as a JSON-ready dict; datetimes use the request date format"""
    return {
        name: value.strftime(DATETIME_FORMAT) if isinstance(value, datetime) else value
        for name, value in dataclasses.asdict(entity).items()
    }


def data(entity) -> Dict[str, Any]:
    return {"data": serialize(entity)}


def data_list(entities: Iterable) -> Dict[str, Any]:
    return {"data": [serialize(entity) for entity in entities]}
