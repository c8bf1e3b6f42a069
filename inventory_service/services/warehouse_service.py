"""Warehouse business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import LocalityRepository, WarehouseRepository
from inventory_service.models.domain import Warehouse
from inventory_service.services.base import EntityService


class WarehouseService(EntityService[Warehouse]):
    """Warehouse service for business logic"""

    resource = "warehouse"
    unique_fields = ("warehouse_code",)

    def __init__(self, repository: WarehouseRepository, locality_repository: LocalityRepository):
        super().__init__(repository, dependencies=[
            DependencyRef("locality_id", "locality", locality_repository.get),
        ])
