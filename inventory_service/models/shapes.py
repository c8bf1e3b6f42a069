"""
Request shapes for every write endpoint

Fields are declared once per entity; the create shape requires all of them
and the update shape accepts any non-empty subset.
"""
from inventory_service.core.validation import FieldSpec, RequestShape, Rule
from inventory_service.models import domain

E164 = Rule.E164.value
DATETIME = Rule.DATETIME.value


BUYER_FIELDS = [
    FieldSpec("card_number_id", str),
    FieldSpec("first_name", str),
    FieldSpec("last_name", str),
]

BuyerCreate = RequestShape.for_create("BuyerCreate", BUYER_FIELDS, domain.Buyer)
BuyerUpdate = RequestShape.for_update("BuyerUpdate", BUYER_FIELDS, domain.BuyerPatch)


EMPLOYEE_FIELDS = [
    FieldSpec("card_number_id", str),
    FieldSpec("first_name", str),
    FieldSpec("last_name", str),
    FieldSpec("warehouse_id", int),
]

EmployeeCreate = RequestShape.for_create("EmployeeCreate", EMPLOYEE_FIELDS, domain.Employee)
EmployeeUpdate = RequestShape.for_update("EmployeeUpdate", EMPLOYEE_FIELDS, domain.EmployeePatch)


WAREHOUSE_FIELDS = [
    FieldSpec("address", str),
    FieldSpec("telephone", str, format=E164),
    FieldSpec("warehouse_code", str),
    FieldSpec("minimum_capacity", int),
    FieldSpec("minimum_temperature", int),
    FieldSpec("locality_id", int),
]

WarehouseCreate = RequestShape.for_create("WarehouseCreate", WAREHOUSE_FIELDS, domain.Warehouse)
WarehouseUpdate = RequestShape.for_update("WarehouseUpdate", WAREHOUSE_FIELDS, domain.WarehousePatch)


SECTION_FIELDS = [
    FieldSpec("section_number", int),
    FieldSpec("current_temperature", float),
    FieldSpec("minimum_temperature", float),
    FieldSpec("current_capacity", int),
    FieldSpec("minimum_capacity", int),
    FieldSpec("maximum_capacity", int),
    FieldSpec("warehouse_id", int),
    FieldSpec("product_type_id", int),
]

SectionCreate = RequestShape.for_create("SectionCreate", SECTION_FIELDS, domain.Section)
SectionUpdate = RequestShape.for_update("SectionUpdate", SECTION_FIELDS, domain.SectionPatch)


SELLER_FIELDS = [
    FieldSpec("cid", int),
    FieldSpec("company_name", str),
    FieldSpec("address", str),
    FieldSpec("telephone", str, format=E164),
    FieldSpec("locality_id", int),
]

SellerCreate = RequestShape.for_create("SellerCreate", SELLER_FIELDS, domain.Seller)
SellerUpdate = RequestShape.for_update("SellerUpdate", SELLER_FIELDS, domain.SellerPatch)


PRODUCT_FIELDS = [
    FieldSpec("description", str),
    FieldSpec("expiration_rate", float),
    FieldSpec("freezing_rate", float),
    FieldSpec("height", float),
    FieldSpec("length", float),
    FieldSpec("netweight", float),
    FieldSpec("product_code", str),
    FieldSpec("recommended_freezing_temperature", float),
    FieldSpec("width", float),
    FieldSpec("product_type_id", int),
    FieldSpec("seller_id", int),
]

ProductCreate = RequestShape.for_create("ProductCreate", PRODUCT_FIELDS, domain.Product)
ProductUpdate = RequestShape.for_update("ProductUpdate", PRODUCT_FIELDS, domain.ProductPatch)


LocalityCreate = RequestShape.for_create("LocalityCreate", [
    FieldSpec("locality_name", str),
    FieldSpec("province_id", int),
], domain.Locality)

CarrierCreate = RequestShape.for_create("CarrierCreate", [
    FieldSpec("cid", str),
    FieldSpec("company_name", str),
    FieldSpec("address", str),
    FieldSpec("telephone", str, format=E164),
    FieldSpec("locality_id", int),
], domain.Carrier)

ProductBatchCreate = RequestShape.for_create("ProductBatchCreate", [
    FieldSpec("batch_number", int),
    FieldSpec("current_quantity", int),
    FieldSpec("current_temperature", float),
    FieldSpec("due_date", str, format=DATETIME),
    FieldSpec("initial_quantity", int),
    FieldSpec("manufacturing_date", str, format=DATETIME),
    FieldSpec("manufacturing_hour", int),
    FieldSpec("minimum_temperature", float),
    FieldSpec("product_id", int),
    FieldSpec("section_id", int),
], domain.ProductBatch)

ProductRecordCreate = RequestShape.for_create("ProductRecordCreate", [
    FieldSpec("last_update_date", str, format=DATETIME),
    FieldSpec("purchase_price", float),
    FieldSpec("sale_price", float),
    FieldSpec("product_id", int),
], domain.ProductRecord)

PurchaseOrderCreate = RequestShape.for_create("PurchaseOrderCreate", [
    FieldSpec("order_number", str),
    FieldSpec("order_date", str, format=DATETIME),
    FieldSpec("tracking_code", str),
    FieldSpec("buyer_id", int),
    FieldSpec("order_status_id", int),
    FieldSpec("warehouse_id", int),
    FieldSpec("product_record_id", int),
    FieldSpec("carrier_id", int),
], domain.PurchaseOrder)

InboundOrderCreate = RequestShape.for_create("InboundOrderCreate", [
    FieldSpec("order_date", str, format=DATETIME),
    FieldSpec("order_number", int),
    FieldSpec("employee_id", int),
    FieldSpec("product_batch_id", int),
    FieldSpec("warehouse_id", int),
], domain.InboundOrder)
