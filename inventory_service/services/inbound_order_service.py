"""Inbound order business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import (
    EmployeeRepository,
    InboundOrderRepository,
    ProductBatchRepository,
    WarehouseRepository,
)
from inventory_service.models.domain import InboundOrder
from inventory_service.services.base import EntityService


class InboundOrderService(EntityService[InboundOrder]):
    """Inbound order service for business logic"""

    resource = "inbound_order"
    unique_fields = ("order_number",)

    def __init__(
        self,
        repository: InboundOrderRepository,
        employee_repository: EmployeeRepository,
        product_batch_repository: ProductBatchRepository,
        warehouse_repository: WarehouseRepository,
    ):
        super().__init__(repository, dependencies=[
            DependencyRef("employee_id", "employee", employee_repository.get),
            DependencyRef("product_batch_id", "product_batch", product_batch_repository.get),
            DependencyRef("warehouse_id", "warehouse", warehouse_repository.get),
        ])
