"""Product batch business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import (
    ProductBatchRepository,
    ProductRepository,
    SectionRepository,
)
from inventory_service.models.domain import ProductBatch
from inventory_service.services.base import EntityService


class ProductBatchService(EntityService[ProductBatch]):
    """Product batch service for business logic"""

    resource = "product_batch"
    unique_fields = ("batch_number",)

    def __init__(
        self,
        repository: ProductBatchRepository,
        product_repository: ProductRepository,
        section_repository: SectionRepository,
    ):
        super().__init__(repository, dependencies=[
            DependencyRef("product_id", "product", product_repository.get),
            DependencyRef("section_id", "section", section_repository.get),
        ])
