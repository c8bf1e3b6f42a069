"""
Purchase order business logic

A purchase order references five other resources; they are resolved in the
order the entity declares them and the first miss rejects the order.
"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import (
    BuyerRepository,
    CarrierRepository,
    OrderStatusRepository,
    ProductRecordRepository,
    PurchaseOrderRepository,
    WarehouseRepository,
)
from inventory_service.models.domain import PurchaseOrder
from inventory_service.services.base import EntityService


class PurchaseOrderService(EntityService[PurchaseOrder]):
    """Purchase order service for business logic"""

    resource = "purchase_order"
    unique_fields = ("order_number",)

    def __init__(
        self,
        repository: PurchaseOrderRepository,
        buyer_repository: BuyerRepository,
        order_status_repository: OrderStatusRepository,
        warehouse_repository: WarehouseRepository,
        product_record_repository: ProductRecordRepository,
        carrier_repository: CarrierRepository,
    ):
        super().__init__(repository, dependencies=[
            DependencyRef("buyer_id", "buyer", buyer_repository.get),
            DependencyRef("order_status_id", "order_status", order_status_repository.get),
            DependencyRef("warehouse_id", "warehouse", warehouse_repository.get),
            DependencyRef("product_record_id", "product_record", product_record_repository.get),
            DependencyRef("carrier_id", "carrier", carrier_repository.get),
        ])
