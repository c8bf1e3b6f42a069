"""FastAPI routes for the Inventory Service"""
from fastapi import APIRouter, Depends, Response, status
from typing import Optional
import logging

from inventory_service.api.dependencies import (
    get_buyer_service,
    get_carrier_service,
    get_employee_service,
    get_inbound_order_service,
    get_locality_service,
    get_product_batch_service,
    get_product_record_service,
    get_product_service,
    get_purchase_order_service,
    get_section_service,
    get_seller_service,
    get_warehouse_service,
    path_id,
    query_id,
    validated_body,
)
from inventory_service.api.serializers import data, data_list
from inventory_service.models import shapes
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

router = APIRouter(prefix="/api/v1")


# Buyers

@router.get("/buyers", tags=["buyers"])
def list_buyers(service: BuyerService = Depends(get_buyer_service)):
    """List all buyers"""
    logger.info("Listing buyers")
    return data_list(service.get_all())


@router.get("/buyers/{id}", tags=["buyers"])
def get_buyer(id: int = Depends(path_id), service: BuyerService = Depends(get_buyer_service)):
    """Get a specific buyer by ID"""
    return data(service.get(id))


@router.post("/buyers", status_code=status.HTTP_201_CREATED, tags=["buyers"])
def create_buyer(
    buyer=Depends(validated_body(shapes.BuyerCreate)),
    service: BuyerService = Depends(get_buyer_service)
):
    """Create a new buyer"""
    return data(service.create(buyer))


@router.patch("/buyers/{id}", tags=["buyers"])
def update_buyer(
    id: int = Depends(path_id),
    patch=Depends(validated_body(shapes.BuyerUpdate)),
    service: BuyerService = Depends(get_buyer_service)
):
    """Update the supplied fields of a buyer"""
    return data(service.update(id, patch))


@router.delete("/buyers/{id}", status_code=status.HTTP_204_NO_CONTENT, tags=["buyers"])
def delete_buyer(id: int = Depends(path_id), service: BuyerService = Depends(get_buyer_service)):
    """Delete a buyer"""
    service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Employees

@router.get("/employees", tags=["employees"])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """List all employees"""
    logger.info("Listing employees")
    return data_list(service.get_all())


@router.get("/employees/{id}", tags=["employees"])
def get_employee(id: int = Depends(path_id), service: EmployeeService = Depends(get_employee_service)):
    """Get a specific employee by ID"""
    return data(service.get(id))


@router.post("/employees", status_code=status.HTTP_201_CREATED, tags=["employees"])
def create_employee(
    employee=Depends(validated_body(shapes.EmployeeCreate)),
    service: EmployeeService = Depends(get_employee_service)
):
    """Create a new employee in an existing warehouse"""
    return data(service.create(employee))


@router.patch("/employees/{id}", tags=["employees"])
def update_employee(
    id: int = Depends(path_id),
    patch=Depends(validated_body(shapes.EmployeeUpdate)),
    service: EmployeeService = Depends(get_employee_service)
):
    """Update the supplied fields of an employee"""
    return data(service.update(id, patch))


@router.delete("/employees/{id}", status_code=status.HTTP_204_NO_CONTENT, tags=["employees"])
def delete_employee(id: int = Depends(path_id), service: EmployeeService = Depends(get_employee_service)):
    """Delete an employee"""
    service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Warehouses

@router.get("/warehouses", tags=["warehouses"])
def list_warehouses(service: WarehouseService = Depends(get_warehouse_service)):
    """List all warehouses"""
    logger.info("Listing warehouses")
    return data_list(service.get_all())


@router.get("/warehouses/{id}", tags=["warehouses"])
def get_warehouse(id: int = Depends(path_id), service: WarehouseService = Depends(get_warehouse_service)):
    """Get a specific warehouse by ID"""
    return data(service.get(id))


@router.post("/warehouses", status_code=status.HTTP_201_CREATED, tags=["warehouses"])
def create_warehouse(
    warehouse=Depends(validated_body(shapes.WarehouseCreate)),
    service: WarehouseService = Depends(get_warehouse_service)
):
    """Create a new warehouse in an existing locality"""
    return data(service.create(warehouse))


@router.patch("/warehouses/{id}", tags=["warehouses"])
def update_warehouse(
    id: int = Depends(path_id),
    patch=Depends(validated_body(shapes.WarehouseUpdate)),
    service: WarehouseService = Depends(get_warehouse_service)
):
    """Update the supplied fields of a warehouse"""
    return data(service.update(id, patch))


@router.delete("/warehouses/{id}", status_code=status.HTTP_204_NO_CONTENT, tags=["warehouses"])
def delete_warehouse(id: int = Depends(path_id), service: WarehouseService = Depends(get_warehouse_service)):
    """Delete a warehouse"""
    service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Sections

@router.get("/sections", tags=["sections"])
def list_sections(service: SectionService = Depends(get_section_service)):
    """List all sections"""
    logger.info("Listing sections")
    return data_list(service.get_all())


@router.get("/sections/report-products", tags=["sections"])
def report_section_products(
    id: Optional[int] = Depends(query_id),
    service: SectionService = Depends(get_section_service)
):
    """Count the product batches stored in each section, or in one section"""
    logger.info(f"Reporting products by section: id={id}")
    report = service.count_products(id)
    return data_list(report) if id is None else data(report)


@router.get("/sections/{id}", tags=["sections"])
def get_section(id: int = Depends(path_id), service: SectionService = Depends(get_section_service)):
    """Get a specific section by ID"""
    return data(service.get(id))


@router.post("/sections", status_code=status.HTTP_201_CREATED, tags=["sections"])
def create_section(
    section=Depends(validated_body(shapes.SectionCreate)),
    service: SectionService = Depends(get_section_service)
):
    """Create a new section"""
    return data(service.create(section))


@router.patch("/sections/{id}", tags=["sections"])
def update_section(
    id: int = Depends(path_id),
    patch=Depends(validated_body(shapes.SectionUpdate)),
    service: SectionService = Depends(get_section_service)
):
    """Update the supplied fields of a section"""
    return data(service.update(id, patch))


@router.delete("/sections/{id}", status_code=status.HTTP_204_NO_CONTENT, tags=["sections"])
def delete_section(id: int = Depends(path_id), service: SectionService = Depends(get_section_service)):
    """Delete a section"""
    service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Sellers

@router.get("/sellers", tags=["sellers"])
def list_sellers(service: SellerService = Depends(get_seller_service)):
    """List all sellers"""
    logger.info("Listing sellers")
    return data_list(service.get_all())


@router.get("/sellers/{id}", tags=["sellers"])
def get_seller(id: int = Depends(path_id), service: SellerService = Depends(get_seller_service)):
    """Get a specific seller by ID"""
    return data(service.get(id))


@router.post("/sellers", status_code=status.HTTP_201_CREATED, tags=["sellers"])
def create_seller(
    seller=Depends(validated_body(shapes.SellerCreate)),
    service: SellerService = Depends(get_seller_service)
):
    """Create a new seller"""
    return data(service.create(seller))


@router.patch("/sellers/{id}", tags=["sellers"])
def update_seller(
    id: int = Depends(path_id),
    patch=Depends(validated_body(shapes.SellerUpdate)),
    service: SellerService = Depends(get_seller_service)
):
    """Update the supplied fields of a seller"""
    return data(service.update(id, patch))


@router.delete("/sellers/{id}", status_code=status.HTTP_204_NO_CONTENT, tags=["sellers"])
def delete_seller(id: int = Depends(path_id), service: SellerService = Depends(get_seller_service)):
    """Delete a seller"""
    service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Products

@router.get("/products", tags=["products"])
def list_products(service: ProductService = Depends(get_product_service)):
    """List all products"""
    logger.info("Listing products")
    return data_list(service.get_all())


@router.get("/products/{id}", tags=["products"])
def get_product(id: int = Depends(path_id), service: ProductService = Depends(get_product_service)):
    """Get a specific product by ID"""
    return data(service.get(id))


@router.post("/products", status_code=status.HTTP_201_CREATED, tags=["products"])
def create_product(
    product=Depends(validated_body(shapes.ProductCreate)),
    service: ProductService = Depends(get_product_service)
):
    """Create a new product"""
    return data(service.create(product))


@router.patch("/products/{id}", tags=["products"])
def update_product(
    id: int = Depends(path_id),
    patch=Depends(validated_body(shapes.ProductUpdate)),
    service: ProductService = Depends(get_product_service)
):
    """Update the supplied fields of a product"""
    return data(service.update(id, patch))


@router.delete("/products/{id}", status_code=status.HTTP_204_NO_CONTENT, tags=["products"])
def delete_product(id: int = Depends(path_id), service: ProductService = Depends(get_product_service)):
    """Delete a product"""
    service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Localities

@router.get("/localities/report-sellers", tags=["localities"])
def report_locality_sellers(
    id: Optional[int] = Depends(query_id),
    service: LocalityService = Depends(get_locality_service)
):
    """Count the sellers of each locality, or of one locality"""
    logger.info(f"Reporting sellers by locality: id={id}")
    report = service.count_sellers(id)
    return data_list(report) if id is None else data(report)


@router.get("/localities/report-carriers", tags=["localities"])
def report_locality_carriers(
    id: Optional[int] = Depends(query_id),
    service: LocalityService = Depends(get_locality_service)
):
    """Count the carriers of each locality, or of one locality"""
    logger.info(f"Reporting carriers by locality: id={id}")
    report = service.count_carriers(id)
    return data_list(report) if id is None else data(report)


@router.get("/localities/{id}", tags=["localities"])
def get_locality(id: int = Depends(path_id), service: LocalityService = Depends(get_locality_service)):
    """Get a specific locality by ID"""
    return data(service.get(id))


@router.post("/localities", status_code=status.HTTP_201_CREATED, tags=["localities"])
def create_locality(
    locality=Depends(validated_body(shapes.LocalityCreate)),
    service: LocalityService = Depends(get_locality_service)
):
    """Create a new locality in an existing province"""
    return data(service.create(locality))


# Carriers

@router.get("/carriers/{id}", tags=["carriers"])
def get_carrier(id: int = Depends(path_id), service: CarrierService = Depends(get_carrier_service)):
    """Get a specific carrier by ID"""
    return data(service.get(id))


@router.post("/carriers", status_code=status.HTTP_201_CREATED, tags=["carriers"])
def create_carrier(
    carrier=Depends(validated_body(shapes.CarrierCreate)),
    service: CarrierService = Depends(get_carrier_service)
):
    """Create a new carrier"""
    return data(service.create(carrier))


# Product batches

@router.get("/product-batches/{id}", tags=["product-batches"])
def get_product_batch(
    id: int = Depends(path_id),
    service: ProductBatchService = Depends(get_product_batch_service)
):
    """Get a specific product batch by ID"""
    return data(service.get(id))


@router.post("/product-batches", status_code=status.HTTP_201_CREATED, tags=["product-batches"])
def create_product_batch(
    batch=Depends(validated_body(shapes.ProductBatchCreate)),
    service: ProductBatchService = Depends(get_product_batch_service)
):
    """Create a new product batch"""
    return data(service.create(batch))


# Product records

@router.get("/product-records/report", tags=["product-records"])
def report_product_records(
    id: Optional[int] = Depends(query_id),
    service: ProductRecordService = Depends(get_product_record_service)
):
    """Count the price records of each product, or of one product"""
    logger.info(f"Reporting records by product: id={id}")
    report = service.count_records(id)
    return data_list(report) if id is None else data(report)


@router.get("/product-records/{id}", tags=["product-records"])
def get_product_record(
    id: int = Depends(path_id),
    service: ProductRecordService = Depends(get_product_record_service)
):
    """Get a specific product record by ID"""
    return data(service.get(id))


@router.post("/product-records", status_code=status.HTTP_201_CREATED, tags=["product-records"])
def create_product_record(
    record=Depends(validated_body(shapes.ProductRecordCreate)),
    service: ProductRecordService = Depends(get_product_record_service)
):
    """Record a product's prices at a point in time"""
    return data(service.create(record))


# Purchase orders

@router.get("/purchase-orders/{id}", tags=["purchase-orders"])
def get_purchase_order(
    id: int = Depends(path_id),
    service: PurchaseOrderService = Depends(get_purchase_order_service)
):
    """Get a specific purchase order by ID"""
    return data(service.get(id))


@router.post("/purchase-orders", status_code=status.HTTP_201_CREATED, tags=["purchase-orders"])
def create_purchase_order(
    order=Depends(validated_body(shapes.PurchaseOrderCreate)),
    service: PurchaseOrderService = Depends(get_purchase_order_service)
):
    """Create a new purchase order"""
    logger.info(f"Creating purchase order {order.order_number} for buyer {order.buyer_id}")
    return data(service.create(order))


# Inbound orders

@router.get("/inbound-orders/{id}", tags=["inbound-orders"])
def get_inbound_order(
    id: int = Depends(path_id),
    service: InboundOrderService = Depends(get_inbound_order_service)
):
    """Get a specific inbound order by ID"""
    return data(service.get(id))


@router.post("/inbound-orders", status_code=status.HTTP_201_CREATED, tags=["inbound-orders"])
def create_inbound_order(
    order=Depends(validated_body(shapes.InboundOrderCreate)),
    service: InboundOrderService = Depends(get_inbound_order_service)
):
    """Create a new inbound order"""
    logger.info(f"Creating inbound order {order.order_number} for warehouse {order.warehouse_id}")
    return data(service.create(order))
