"""Seller business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import LocalityRepository, SellerRepository
from inventory_service.models.domain import Seller
from inventory_service.services.base import EntityService


class SellerService(EntityService[Seller]):
    """Seller service for business logic"""

    resource = "seller"
    unique_fields = ("cid",)

    def __init__(self, repository: SellerRepository, locality_repository: LocalityRepository):
        super().__init__(repository, dependencies=[
            DependencyRef("locality_id", "locality", locality_repository.get),
        ])
