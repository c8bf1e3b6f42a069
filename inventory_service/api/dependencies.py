"""
FastAPI dependencies: validated request bodies, path ids and services
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session
import logging
import re
from typing import Optional

from inventory_service.api.errors import InvalidIdentifier
from inventory_service.core.messages import render
from inventory_service.core.validation import INT64_MAX, INT64_MIN, RequestShape, validate
from inventory_service.db.database import get_db
from inventory_service.db.repositories import (
    BuyerRepository,
    CarrierRepository,
    EmployeeRepository,
    InboundOrderRepository,
    LocalityRepository,
    OrderStatusRepository,
    ProductBatchRepository,
    ProductRecordRepository,
    ProductRepository,
    ProductTypeRepository,
    ProvinceRepository,
    PurchaseOrderRepository,
    SectionRepository,
    SellerRepository,
    WarehouseRepository,
)
from inventory_service.services.buyer_service import BuyerService
from inventory_service.services.carrier_service import CarrierService
from inventory_service.services.employee_service import EmployeeService
from inventory_service.services.inbound_order_service import InboundOrderService
from inventory_service.services.locality_service import LocalityService
from inventory_service.services.product_batch_service import ProductBatchService
from inventory_service.services.product_record_service import ProductRecordService
from inventory_service.services.product_service import ProductService
from inventory_service.services.purchase_order_service import PurchaseOrderService
from inventory_service.services.section_service import SectionService
from inventory_service.services.seller_service import SellerService
from inventory_service.services.warehouse_service import WarehouseService

logger = logging.getLogger(__name__)

ID_PATTERN = re.compile(r"^-?\d{1,19}$")


def validated_body(shape: RequestShape):
    """
    Dependency validating the request body against a shape

    Raises InvalidPayload before the route runs when validation fails.
    """
    async def dependency(request: Request):
        raw = await request.body()
        result = validate(shape, raw)
        if not result.ok:
            logger.info(f"{shape.name} rejected with {len(result.failures)} failure(s)")
            result.raise_for_failures()
        return result.value

    return dependency


def _parse_id(raw: str) -> int:
    if not ID_PATTERN.match(raw):
        raise InvalidIdentifier(render("request.invalid_id", id=raw))

    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidIdentifier(render("request.invalid_id", id=raw))
    return value


def path_id(id: str) -> int:
    """Dependency parsing the {id} path parameter"""
    return _parse_id(id)


def query_id(id: Optional[str] = None) -> Optional[int]:
    """Dependency parsing the optional ?id= query parameter of report endpoints"""
    if id is None or id == "":
        return None
    return _parse_id(id)


def get_buyer_service(db: Session = Depends(get_db)) -> BuyerService:
    return BuyerService(BuyerRepository(db))


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(EmployeeRepository(db), WarehouseRepository(db))


def get_warehouse_service(db: Session = Depends(get_db)) -> WarehouseService:
    return WarehouseService(WarehouseRepository(db), LocalityRepository(db))


def get_section_service(db: Session = Depends(get_db)) -> SectionService:
    return SectionService(SectionRepository(db), WarehouseRepository(db), ProductTypeRepository(db))


def get_seller_service(db: Session = Depends(get_db)) -> SellerService:
    return SellerService(SellerRepository(db), LocalityRepository(db))


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db), ProductTypeRepository(db), SellerRepository(db))


def get_locality_service(db: Session = Depends(get_db)) -> LocalityService:
    return LocalityService(LocalityRepository(db), ProvinceRepository(db))


def get_carrier_service(db: Session = Depends(get_db)) -> CarrierService:
    return CarrierService(CarrierRepository(db), LocalityRepository(db))


def get_product_batch_service(db: Session = Depends(get_db)) -> ProductBatchService:
    return ProductBatchService(ProductBatchRepository(db), ProductRepository(db), SectionRepository(db))


def get_product_record_service(db: Session = Depends(get_db)) -> ProductRecordService:
    return ProductRecordService(ProductRecordRepository(db), ProductRepository(db))


def get_purchase_order_service(db: Session = Depends(get_db)) -> PurchaseOrderService:
    return PurchaseOrderService(
        PurchaseOrderRepository(db),
        BuyerRepository(db),
        OrderStatusRepository(db),
        WarehouseRepository(db),
        ProductRecordRepository(db),
        CarrierRepository(db),
    )


def get_inbound_order_service(db: Session = Depends(get_db)) -> InboundOrderService:
    return InboundOrderService(
        InboundOrderRepository(db),
        EmployeeRepository(db),
        ProductBatchRepository(db),
        WarehouseRepository(db),
    )
