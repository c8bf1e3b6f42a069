"""
Generic request validation

A ``RequestShape`` is declared once per endpoint from a list of ``FieldSpec``
values. ``validate`` decodes a raw JSON payload against it and returns either
the populated target value or every field-level failure found.

Decoding runs in two passes:

1. Wire decoding and primitive type checks (pydantic, strict mode). A syntax
   error or the first type mismatch rejects the payload with one failure.
2. Required and format rules, evaluated per field in declaration order.
   All failures of this pass are collected.
"""
import enum
import re
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Annotated, Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import ConfigDict, Field, ValidationError, create_model

from inventory_service.core.errors import FailureClass, InvalidPayload
from inventory_service.core.maybe import Present
from inventory_service.core.messages import render

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Integer fields and ids are stored as signed 64-bit columns
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

E164_PATTERN = re.compile(r"^\+[1-9]?[0-9]{7,14}$")
DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")
JSON_LOCATION_PATTERN = re.compile(r"^(?P<detail>.*) at (?P<location>line \d+ column \d+)$")

TYPE_NAMES = {
    str: "string",
    int: "int",
    float: "float",
    bool: "bool",
}


class Rule(str, enum.Enum):
    """Rules a failure can report"""
    SYNTAX = "syntax"
    TYPE = "type"
    REQUIRED = "required"
    E164 = "e164"
    DATETIME = "datetime"
    UNKNOWN = "unknown"
    BLANK = "blank"


def _check_e164(value):
    if not isinstance(value, str) or not E164_PATTERN.match(value):
        raise ValueError(value)
    return value


def _check_datetime(value):
    if not isinstance(value, str) or not DATETIME_PATTERN.match(value):
        raise ValueError(value)
    return datetime.strptime(value, DATETIME_FORMAT)


# Format checkers return the converted wire value or raise ValueError
FORMATS: Dict[str, Callable[[Any], Any]] = {
    Rule.E164.value: _check_e164,
    Rule.DATETIME.value: _check_datetime,
}


@dataclass(frozen=True)
class FieldSpec:
    """One field of a request shape"""
    name: str
    type: type = str
    key: Optional[str] = None
    required: bool = False
    format: Optional[str] = None

    def __post_init__(self):
        if self.type not in TYPE_NAMES:
            raise TypeError(f"Unsupported field type {self.type!r} for '{self.name}'")
        if self.key is None:
            object.__setattr__(self, "key", self.name)

    @property
    def type_name(self) -> str:
        return TYPE_NAMES[self.type]


@dataclass(frozen=True)
class ValidationFailure:
    """One field-level failure; ``field`` is the wire key or None for the whole payload"""
    field: Optional[str]
    rule: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    value: Any = None
    failures: Tuple[ValidationFailure, ...] = ()
    failure_class: Optional[FailureClass] = None

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        if self.failures:
            raise InvalidPayload(self.failures, self.failure_class)


class RequestShape:
    """
    Ordered set of FieldSpecs describing one endpoint's payload

    Args:
        name: Shape name, used for the compiled payload model
        fields: Field declarations, in wire order
        target: Callable building the parsed value from keyword arguments
        partial: Build the target with ``Present`` values (update shapes)
        can_be_blank: Accept a payload in which no field is supplied
    """

    def __init__(
        self,
        name: str,
        fields: Sequence[FieldSpec],
        target: Callable[..., Any] = dict,
        partial: bool = False,
        can_be_blank: bool = True,
    ):
        self.name = name
        self.fields: Tuple[FieldSpec, ...] = tuple(fields)
        self.target = target
        self.partial = partial
        self.can_be_blank = can_be_blank

        keys = [spec.key for spec in self.fields]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate wire keys in shape {name}: {keys}")

        self._by_key = {spec.key: spec for spec in self.fields}
        self.payload_model = _compile_payload_model(name, self.fields)

    @classmethod
    def for_create(cls, name: str, fields: Sequence[FieldSpec], target: Callable[..., Any]):
        """Shape in which every field is required"""
        return cls(name, [replace(spec, required=True) for spec in fields], target)

    @classmethod
    def for_update(
        cls,
        name: str,
        fields: Sequence[FieldSpec],
        target: Callable[..., Any],
        can_be_blank: bool = False,
    ):
        """Shape in which every field is optional and values arrive as ``Present``"""
        return cls(
            name,
            [replace(spec, required=False) for spec in fields],
            target,
            partial=True,
            can_be_blank=can_be_blank,
        )

    @property
    def keys(self) -> List[str]:
        return [spec.key for spec in self.fields]

    def field_for_key(self, key: str) -> Optional[FieldSpec]:
        return self._by_key.get(key)

    def __repr__(self):
        return f"<RequestShape(name={self.name}, fields={self.keys})>"


def _wire_type(field_type: type):
    if field_type is int:
        return Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
    return field_type


def _compile_payload_model(name: str, fields: Sequence[FieldSpec]):
    """
    Build the strict pydantic model used for wire decoding

    Integers outside the 64-bit range fail decoding like any other type
    mismatch.
    """
    definitions = {
        spec.name: (Optional[_wire_type(spec.type)], Field(default=None, alias=spec.key))
        for spec in fields
    }
    return create_model(
        f"{name}Payload",
        __config__=ConfigDict(strict=True, extra="ignore"),
        **definitions,
    )


def validate(shape: RequestShape, raw: Union[str, bytes]) -> ValidationResult:
    """
    Validate a raw JSON payload against a request shape

    Returns:
        ValidationResult with the populated target value, or the failures
        and their status class
    """
    try:
        payload = shape.payload_model.model_validate_json(raw)
    except ValidationError as exc:
        return ValidationResult(
            failures=(_decode_failure(shape, exc),),
            failure_class=FailureClass.UNPROCESSABLE,
        )

    failures: List[ValidationFailure] = []
    values: Dict[str, Any] = {}
    supplied = payload.model_fields_set

    for spec in shape.fields:
        value = getattr(payload, spec.name)

        if spec.name not in supplied or value is None:
            if spec.required:
                failures.append(ValidationFailure(
                    spec.key, Rule.REQUIRED.value, render("validation.required", field=spec.key)
                ))
            continue

        if spec.format is not None:
            check = FORMATS.get(spec.format)
            if check is None:
                failures.append(ValidationFailure(
                    spec.key, Rule.UNKNOWN.value, render("validation.unknown", field=spec.key)
                ))
                continue
            try:
                value = check(value)
            except ValueError:
                failures.append(ValidationFailure(
                    spec.key, spec.format, render(f"validation.{spec.format}", field=spec.key)
                ))
                continue

        values[spec.name] = value

    if failures:
        return ValidationResult(failures=tuple(failures), failure_class=FailureClass.UNPROCESSABLE)

    if not shape.can_be_blank and not values:
        blank = ValidationFailure(
            None, Rule.BLANK.value, render("validation.blank", fields=", ".join(shape.keys))
        )
        return ValidationResult(failures=(blank,), failure_class=FailureClass.BAD_REQUEST)

    if shape.partial:
        return ValidationResult(value=shape.target(**{k: Present(v) for k, v in values.items()}))

    return ValidationResult(value=shape.target(**values))


def _decode_failure(shape: RequestShape, exc: ValidationError) -> ValidationFailure:
    """Reduce a decoding error to the single failure reported for it"""
    errors = exc.errors(include_url=False)

    for error in errors:
        if error["type"] == "json_invalid":
            detail = str(error.get("ctx", {}).get("error", error["msg"]))
            match = JSON_LOCATION_PATTERN.match(detail)
            if match:
                location, detail = match.group("location"), match.group("detail")
            else:
                location = "line 1 column 0"
            return ValidationFailure(
                None, Rule.SYNTAX.value,
                render("validation.syntax", location=location, detail=detail),
            )

    error = errors[0]
    if not error["loc"]:
        # Top-level value is not a JSON object
        return ValidationFailure(
            None, Rule.TYPE.value, render("validation.type", field="payload", type="object")
        )

    key = str(error["loc"][0])
    spec = shape.field_for_key(key)
    type_name = spec.type_name if spec else "unknown"
    return ValidationFailure(key, Rule.TYPE.value, render("validation.type", field=key, type=type_name))
