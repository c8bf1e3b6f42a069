import json
from datetime import datetime

import pytest

from inventory_service.core.errors import FailureClass, InvalidPayload
from inventory_service.core.maybe import ABSENT, Present
from inventory_service.core.validation import FieldSpec, RequestShape, validate
from inventory_service.models import domain, shapes


def payload(**fields) -> str:
    return json.dumps(fields)


def test_buyer_create_accepts_complete_payload():
    result = validate(shapes.BuyerCreate, payload(card_number_id="123", first_name="A", last_name="B"))

    assert result.ok
    assert result.value == domain.Buyer(card_number_id="123", first_name="A", last_name="B")


def test_missing_required_fields_are_collected():
    result = validate(shapes.BuyerCreate, payload(first_name="A"))

    assert [(f.field, f.rule) for f in result.failures] == [
        ("card_number_id", "required"),
        ("last_name", "required"),
    ]
    assert result.failure_class == FailureClass.UNPROCESSABLE
    assert result.failures[0].message == "'card_number_id' is required"


def test_null_counts_as_missing():
    result = validate(shapes.BuyerCreate, payload(card_number_id=None, first_name="A", last_name="B"))

    assert [(f.field, f.rule) for f in result.failures] == [("card_number_id", "required")]


def test_required_failure_names_the_wire_key():
    shape = RequestShape.for_create("Contact", [FieldSpec("first_name", str, key="firstName")], dict)

    result = validate(shape, "{}")

    assert [f.field for f in result.failures] == ["firstName"]
    assert result.failures[0].message == "'firstName' is required"


def test_type_mismatch_names_field_and_expected_type():
    shape = RequestShape.for_create("Pair", [FieldSpec("field_a", str), FieldSpec("field_b", int)], dict)

    result = validate(shape, payload(field_a=1, field_b=2))

    assert len(result.failures) == 1
    assert result.failures[0].field == "field_a"
    assert result.failures[0].rule == "type"
    assert result.failures[0].message == "field 'field_a' must be 'string'"
    assert result.failure_class == FailureClass.UNPROCESSABLE


def test_integer_field_rejects_string():
    result = validate(shapes.EmployeeCreate, payload(
        card_number_id="1", first_name="A", last_name="B", warehouse_id="7"
    ))

    assert [f.message for f in result.failures] == ["field 'warehouse_id' must be 'int'"]


def test_malformed_payload_is_a_single_syntax_failure():
    result = validate(shapes.BuyerCreate, '{"card_number_id": ')

    assert len(result.failures) == 1
    failure = result.failures[0]
    assert failure.field is None
    assert failure.rule == "syntax"
    assert failure.message.startswith("syntax error at line 1 column")
    assert result.failure_class == FailureClass.UNPROCESSABLE


def test_non_object_payload_is_rejected():
    result = validate(shapes.BuyerCreate, "[1, 2]")

    assert [f.message for f in result.failures] == ["field 'payload' must be 'object'"]


def test_phone_outside_e164_reports_format_example():
    result = validate(shapes.WarehouseCreate, payload(
        address="Rua A",
        telephone="Phone",
        warehouse_code="WH-1",
        minimum_capacity=10,
        minimum_temperature=-5,
        locality_id=1,
    ))

    assert len(result.failures) == 1
    assert result.failures[0].field == "telephone"
    assert result.failures[0].rule == "e164"
    assert "+5500123456789" in result.failures[0].message


def test_format_and_required_failures_are_collected_together():
    result = validate(shapes.SellerCreate, payload(cid=1, company_name="Meli", telephone="11 9999"))

    assert [(f.field, f.rule) for f in result.failures] == [
        ("address", "required"),
        ("telephone", "e164"),
        ("locality_id", "required"),
    ]


def test_datetime_field_is_parsed():
    result = validate(shapes.ProductRecordCreate, payload(
        last_update_date="2021-01-01 01:00:00", purchase_price=10.5, sale_price=15, product_id=1
    ))

    assert result.ok
    assert result.value.last_update_date == datetime(2021, 1, 1, 1, 0, 0)
    assert result.value.sale_price == 15


@pytest.mark.parametrize("value", ["2021/01/01 01:00:00", "2021-01-01", "2021-13-01 01:00:00"])
def test_bad_datetime_is_a_format_failure(value):
    result = validate(shapes.ProductRecordCreate, payload(
        last_update_date=value, purchase_price=10.5, sale_price=15.0, product_id=1
    ))

    assert [(f.field, f.rule) for f in result.failures] == [("last_update_date", "datetime")]
    assert result.failure_class == FailureClass.UNPROCESSABLE


def test_unrecognized_format_tag_does_not_crash():
    shape = RequestShape.for_create("Price", [FieldSpec("currency", str, format="iso4217")], dict)

    result = validate(shape, payload(currency="BRL"))

    assert [(f.field, f.rule) for f in result.failures] == [("currency", "unknown")]
    assert result.failures[0].message == "unknown validation error on 'currency'"


def test_blank_update_is_a_bad_request():
    result = validate(shapes.BuyerUpdate, "{}")

    assert len(result.failures) == 1
    failure = result.failures[0]
    assert failure.field is None
    assert failure.rule == "blank"
    assert result.failure_class == FailureClass.BAD_REQUEST
    assert failure.message.endswith("card_number_id, first_name, last_name")


def test_blank_update_allowed_when_shape_permits_it():
    shape = RequestShape.for_update("BuyerUpdate", shapes.BUYER_FIELDS, domain.BuyerPatch, can_be_blank=True)

    result = validate(shape, "{}")

    assert result.ok
    assert result.value.is_blank()


def test_update_builds_sparse_patch():
    result = validate(shapes.BuyerUpdate, payload(first_name="Cleber"))

    assert result.ok
    assert result.value == domain.BuyerPatch(first_name=Present("Cleber"))
    assert result.value.card_number_id is ABSENT


def test_unknown_keys_are_ignored():
    result = validate(shapes.BuyerUpdate, payload(first_name="Cleber", nickname="C"))

    assert result.value.supplied() == ["first_name"]


def test_raise_for_failures_carries_every_message():
    result = validate(shapes.BuyerCreate, "{}")

    with pytest.raises(InvalidPayload) as exc_info:
        result.raise_for_failures()

    assert exc_info.value.failure_class == FailureClass.UNPROCESSABLE
    assert exc_info.value.fields() == ["card_number_id", "first_name", "last_name"]


def test_duplicate_wire_keys_are_rejected():
    with pytest.raises(ValueError):
        RequestShape("Broken", [FieldSpec("a", str), FieldSpec("b", str, key="a")])


def warehouse_payload(**overrides) -> str:
    fields = dict(
        address="Rua A",
        telephone="+5511999999999",
        warehouse_code="WH-1",
        minimum_capacity=10,
        minimum_temperature=-5,
        locality_id=1,
    )
    fields.update(overrides)
    return payload(**fields)


@pytest.mark.parametrize("telephone", ["+123", "+123456", "5511999999999", "+5511999999999999"])
def test_short_or_unprefixed_phone_is_rejected(telephone):
    result = validate(shapes.WarehouseCreate, warehouse_payload(telephone=telephone))

    assert [(f.field, f.rule) for f in result.failures] == [("telephone", "e164")]


@pytest.mark.parametrize("telephone", ["+0123456789", "+12345678", "+5500123456789"])
def test_e164_phone_is_accepted(telephone):
    result = validate(shapes.WarehouseCreate, warehouse_payload(telephone=telephone))

    assert result.ok
    assert result.value.telephone == telephone


@pytest.mark.parametrize("value", [2**63, -2**63 - 1, 10**30])
def test_integer_outside_64_bits_is_a_type_failure(value):
    result = validate(shapes.WarehouseCreate, warehouse_payload(locality_id=value))

    assert [f.message for f in result.failures] == ["field 'locality_id' must be 'int'"]
    assert result.failure_class == FailureClass.UNPROCESSABLE


@pytest.mark.parametrize("value", [2**63 - 1, -2**63])
def test_integer_at_64_bit_bounds_is_accepted(value):
    result = validate(shapes.WarehouseCreate, warehouse_payload(minimum_capacity=value))

    assert result.ok
    assert result.value.minimum_capacity == value
