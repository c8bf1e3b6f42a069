"""Product business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import (
    ProductRepository,
    ProductTypeRepository,
    SellerRepository,
)
from inventory_service.models.domain import Product
from inventory_service.services.base import EntityService


class ProductService(EntityService[Product]):
    """Product service for business logic"""

    resource = "product"
    unique_fields = ("product_code",)

    def __init__(
        self,
        repository: ProductRepository,
        product_type_repository: ProductTypeRepository,
        seller_repository: SellerRepository,
    ):
        super().__init__(repository, dependencies=[
            DependencyRef("product_type_id", "product_type", product_type_repository.get),
            DependencyRef("seller_id", "seller", seller_repository.get),
        ])
