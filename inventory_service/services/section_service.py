"""Section business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import (
    ProductTypeRepository,
    SectionRepository,
    WarehouseRepository,
)
from inventory_service.models.domain import Section
from inventory_service.services.base import EntityService


class SectionService(EntityService[Section]):
    """Section service for business logic"""

    resource = "section"
    unique_fields = ("section_number",)

    def __init__(
        self,
        repository: SectionRepository,
        warehouse_repository: WarehouseRepository,
        product_type_repository: ProductTypeRepository,
    ):
        super().__init__(repository, dependencies=[
            DependencyRef("warehouse_id", "warehouse", warehouse_repository.get),
            DependencyRef("product_type_id", "product_type", product_type_repository.get),
        ])

    def count_products(self, id=None):
        """Product batches per section, or for one section"""
        return self._report("count_products", self.repository.count_products, id)
