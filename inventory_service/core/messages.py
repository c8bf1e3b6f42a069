"""
Localizable message catalog

Every client-visible message is looked up here by key and rendered with
``str.format`` parameters. The active locale is set once at startup.
"""
import logging
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        # Request validation
        "validation.syntax": "syntax error at {location}: {detail}",
        "validation.type": "field '{field}' must be '{type}'",
        "validation.required": "'{field}' is required",
        "validation.e164": (
            "'{field}' must be in the format +<country_code><zone_code><phone_number> "
            "without spaces or special characters, for example: +5500123456789"
        ),
        "validation.datetime": (
            "'{field}' must be a date in the format yyyy-MM-dd HH:mm:ss, "
            "for example: 2021-01-01 01:00:00"
        ),
        "validation.unknown": "unknown validation error on '{field}'",
        "validation.blank": (
            "at least one of the following fields must be provided for modification: {fields}"
        ),
        "request.invalid_id": "the id '{id}' is invalid",
        "request.internal_error": "an internal error occurred",
        # Resources
        "buyer.not_found": "buyer not found with id {id}",
        "buyer.already_exists": "a buyer with card number '{value}' already exists",
        "employee.not_found": "employee not found with id {id}",
        "employee.already_exists": "an employee with card number '{value}' already exists",
        "warehouse.not_found": "warehouse not found with id {id}",
        "warehouse.already_exists": "a warehouse with code '{value}' already exists",
        "section.not_found": "section not found with id {id}",
        "section.already_exists": "a section with number '{value}' already exists",
        "seller.not_found": "seller not found with id {id}",
        "seller.already_exists": "a seller with cid '{value}' already exists",
        "product.not_found": "product not found with id {id}",
        "product.already_exists": "a product with code '{value}' already exists",
        "product_type.not_found": "product type not found with id {id}",
        "locality.not_found": "locality not found with id {id}",
        "locality.already_exists": "a locality named '{value}' already exists",
        "province.not_found": "province not found with id {id}",
        "carrier.not_found": "carrier not found with id {id}",
        "carrier.already_exists": "a carrier with cid '{value}' already exists",
        "product_batch.not_found": "product batch not found with id {id}",
        "product_batch.already_exists": "a product batch with number '{value}' already exists",
        "product_record.not_found": "product record not found with id {id}",
        "product_record.already_exists": (
            "a product record for product '{value[0]}' updated at '{value[1]}' already exists"
        ),
        "order_status.not_found": "order status not found with id {id}",
        "purchase_order.not_found": "purchase order not found with id {id}",
        "purchase_order.already_exists": "a purchase order with number '{value}' already exists",
        "inbound_order.not_found": "inbound order not found with id {id}",
        "inbound_order.already_exists": "an inbound order with number '{value}' already exists",
    },
    "pt_BR": {
        "validation.syntax": "erro de sintaxe em {location}: {detail}",
        "validation.type": "o campo '{field}' deve ser '{type}'",
        "validation.required": "'{field}' é obrigatório",
        "validation.e164": (
            "'{field}' precisa estar no formato +<country_code><zone_code><phone_number> "
            "sem espaços ou caracteres especiais, por exemplo: +5500123456789"
        ),
        "validation.datetime": (
            "'{field}' precisa ser uma data no formato yyyy-MM-dd HH:mm:ss, "
            "por exemplo: 2021-01-01 01:00:00"
        ),
        "validation.unknown": "erro desconhecido em '{field}'",
        "validation.blank": (
            "pelo menos um dos seguintes campos deve ser informado para modificações: {fields}"
        ),
        "request.invalid_id": "o id '{id}' é inválido",
        "request.internal_error": "ocorreu um erro interno",
        "buyer.not_found": "comprador não encontrado com o id {id}",
        "buyer.already_exists": "um comprador com o número de cartão '{value}' já existe",
        "employee.not_found": "empregado não encontrado com o id {id}",
        "employee.already_exists": "um empregado com card number ID '{value}' já existe",
        "warehouse.not_found": "armazém não encontrado com o id {id}",
        "warehouse.already_exists": "um armazém com o código '{value}' já existe",
        "section.not_found": "seção não encontrada com o id {id}",
        "section.already_exists": "uma seção com o número '{value}' já existe",
        "seller.not_found": "vendedor não encontrado com o id {id}",
        "seller.already_exists": "um vendedor com o cid '{value}' já existe",
        "product.not_found": "produto não encontrado com o id {id}",
        "product.already_exists": "um produto com o código '{value}' já existe",
        "product_type.not_found": "tipo de produto não encontrado com o id {id}",
        "locality.not_found": "localidade não encontrada com o id {id}",
        "locality.already_exists": "uma localidade com o nome '{value}' já existe",
        "province.not_found": "estado não encontrado com o id {id}",
        "carrier.not_found": "transportadora não encontrada com o id {id}",
        "carrier.already_exists": "uma transportadora com cid '{value}' já existe",
        "product_batch.not_found": "lote de produto não encontrado com o id {id}",
        "product_batch.already_exists": "um lote de produto com o número '{value}' já existe",
        "product_record.not_found": "registro de produto não encontrado com o id {id}",
        "product_record.already_exists": (
            "um registro de produto com o id de produto '{value[0]}' "
            "e última data de atualização '{value[1]}' já existe"
        ),
        "order_status.not_found": "status da ordem não encontrado com o id {id}",
        "purchase_order.not_found": "ordem de compra não encontrada com o id {id}",
        "purchase_order.already_exists": "uma ordem de compra com o número '{value}' já existe",
        "inbound_order.not_found": "ordem de entrada não encontrada com o id {id}",
        "inbound_order.already_exists": "ordem de entrada com o número '{value}' já existe",
    },
}

_locale = DEFAULT_LOCALE


def configure_locale(locale: str) -> None:
    """Select the catalog used by ``render``"""
    global _locale

    if locale not in CATALOG:
        logger.warning(f"Unknown locale {locale}, falling back to {DEFAULT_LOCALE}")
        locale = DEFAULT_LOCALE

    _locale = locale
    logger.info(f"Message locale set to {locale}")


def current_locale() -> str:
    return _locale


def render(key: str, locale: str = None, **params) -> str:
    """
    Render a catalog message

    Falls back to the default locale when the active one lacks the key.
    """
    catalog = CATALOG[locale or _locale]
    template = catalog.get(key) or CATALOG[DEFAULT_LOCALE][key]
    return template.format(**params)
