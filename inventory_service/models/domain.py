"""
Domain entities and their patch types

Entities are immutable values; repositories map them to and from table rows.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from inventory_service.core.maybe import ABSENT, Maybe
from inventory_service.core.merge import Patch


@dataclass(frozen=True, kw_only=True)
class Buyer:
    id: Optional[int] = None
    card_number_id: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class BuyerPatch(Patch, entity=Buyer):
    card_number_id: Maybe[str] = ABSENT
    first_name: Maybe[str] = ABSENT
    last_name: Maybe[str] = ABSENT


@dataclass(frozen=True, kw_only=True)
class Employee:
    id: Optional[int] = None
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int


@dataclass(frozen=True)
class EmployeePatch(Patch, entity=Employee):
    card_number_id: Maybe[str] = ABSENT
    first_name: Maybe[str] = ABSENT
    last_name: Maybe[str] = ABSENT
    warehouse_id: Maybe[int] = ABSENT


@dataclass(frozen=True, kw_only=True)
class Warehouse:
    id: Optional[int] = None
    address: str
    telephone: str
    warehouse_code: str
    minimum_capacity: int
    minimum_temperature: int
    locality_id: int


@dataclass(frozen=True)
class WarehousePatch(Patch, entity=Warehouse):
    address: Maybe[str] = ABSENT
    telephone: Maybe[str] = ABSENT
    warehouse_code: Maybe[str] = ABSENT
    minimum_capacity: Maybe[int] = ABSENT
    minimum_temperature: Maybe[int] = ABSENT
    locality_id: Maybe[int] = ABSENT


@dataclass(frozen=True, kw_only=True)
class Section:
    id: Optional[int] = None
    section_number: int
    current_temperature: float
    minimum_temperature: float
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int
    product_type_id: int


@dataclass(frozen=True)
class SectionPatch(Patch, entity=Section):
    section_number: Maybe[int] = ABSENT
    current_temperature: Maybe[float] = ABSENT
    minimum_temperature: Maybe[float] = ABSENT
    current_capacity: Maybe[int] = ABSENT
    minimum_capacity: Maybe[int] = ABSENT
    maximum_capacity: Maybe[int] = ABSENT
    warehouse_id: Maybe[int] = ABSENT
    product_type_id: Maybe[int] = ABSENT


@dataclass(frozen=True, kw_only=True)
class Seller:
    id: Optional[int] = None
    cid: int
    company_name: str
    address: str
    telephone: str
    locality_id: int


@dataclass(frozen=True)
class SellerPatch(Patch, entity=Seller):
    cid: Maybe[int] = ABSENT
    company_name: Maybe[str] = ABSENT
    address: Maybe[str] = ABSENT
    telephone: Maybe[str] = ABSENT
    locality_id: Maybe[int] = ABSENT


@dataclass(frozen=True, kw_only=True)
class Product:
    id: Optional[int] = None
    description: str
    expiration_rate: float
    freezing_rate: float
    height: float
    length: float
    netweight: float
    product_code: str
    recommended_freezing_temperature: float
    width: float
    product_type_id: int
    seller_id: int


@dataclass(frozen=True)
class ProductPatch(Patch, entity=Product):
    description: Maybe[str] = ABSENT
    expiration_rate: Maybe[float] = ABSENT
    freezing_rate: Maybe[float] = ABSENT
    height: Maybe[float] = ABSENT
    length: Maybe[float] = ABSENT
    netweight: Maybe[float] = ABSENT
    product_code: Maybe[str] = ABSENT
    recommended_freezing_temperature: Maybe[float] = ABSENT
    width: Maybe[float] = ABSENT
    product_type_id: Maybe[int] = ABSENT
    seller_id: Maybe[int] = ABSENT


@dataclass(frozen=True, kw_only=True)
class Locality:
    id: Optional[int] = None
    locality_name: str
    province_id: int


@dataclass(frozen=True, kw_only=True)
class Carrier:
    id: Optional[int] = None
    cid: str
    company_name: str
    address: str
    telephone: str
    locality_id: int


@dataclass(frozen=True, kw_only=True)
class ProductBatch:
    id: Optional[int] = None
    batch_number: int
    current_quantity: int
    current_temperature: float
    due_date: datetime
    initial_quantity: int
    manufacturing_date: datetime
    manufacturing_hour: int
    minimum_temperature: float
    product_id: int
    section_id: int


@dataclass(frozen=True, kw_only=True)
class ProductRecord:
    id: Optional[int] = None
    last_update_date: datetime
    purchase_price: float
    sale_price: float
    product_id: int


@dataclass(frozen=True, kw_only=True)
class PurchaseOrder:
    id: Optional[int] = None
    order_number: str
    order_date: datetime
    tracking_code: str
    buyer_id: int
    order_status_id: int
    warehouse_id: int
    product_record_id: int
    carrier_id: int


@dataclass(frozen=True, kw_only=True)
class InboundOrder:
    id: Optional[int] = None
    order_date: datetime
    order_number: int
    employee_id: int
    product_batch_id: int
    warehouse_id: int


# Reference data, read-only

@dataclass(frozen=True, kw_only=True)
class Province:
    id: Optional[int] = None
    province_name: str


@dataclass(frozen=True, kw_only=True)
class ProductType:
    id: Optional[int] = None
    description: str


@dataclass(frozen=True, kw_only=True)
class OrderStatus:
    id: Optional[int] = None
    description: str


# Reports, one row per grouped parent

@dataclass(frozen=True)
class SellersByLocality:
    locality_id: int
    locality_name: str
    sellers_count: int


@dataclass(frozen=True)
class CarriersByLocality:
    locality_id: int
    locality_name: str
    carriers_count: int


@dataclass(frozen=True)
class RecordsByProduct:
    product_id: int
    description: str
    records_count: int


@dataclass(frozen=True)
class ProductsBySection:
    section_id: int
    section_number: int
    products_count: int
