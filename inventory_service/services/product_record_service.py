"""Product record business logic"""
from typing import List, Optional, Union

from inventory_service.core.dependencies import DependencyRef
from inventory_service.core.errors import ResourceNotFound
from inventory_service.core.messages import render
from inventory_service.db.repositories import ProductRecordRepository, ProductRepository
from inventory_service.models.domain import ProductRecord, RecordsByProduct
from inventory_service.services.base import EntityService


class ProductRecordService(EntityService[ProductRecord]):
    """A product has at most one record per update timestamp"""

    resource = "product_record"
    unique_fields = ("product_id", "last_update_date")

    def __init__(self, repository: ProductRecordRepository, product_repository: ProductRepository):
        super().__init__(repository, dependencies=[
            DependencyRef("product_id", "product", product_repository.get),
        ])
        self.product_repository = product_repository

    def count_records(self, product_id: Optional[int] = None) -> Union[RecordsByProduct, List[RecordsByProduct]]:
        """
        Records per product, or for one product

        Raises:
            ResourceNotFound: product_id names no product
        """
        with self._span("count_records") as span:
            if product_id is None:
                return self.product_repository.count_records()

            span.set_attribute("product.id", product_id)
            if self.product_repository.get(product_id) is None:
                raise ResourceNotFound(render("product.not_found", id=product_id))

            return self.product_repository.count_records(product_id)[0]
