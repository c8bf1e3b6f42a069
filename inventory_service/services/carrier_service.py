"""Carrier business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import CarrierRepository, LocalityRepository
from inventory_service.models.domain import Carrier
from inventory_service.services.base import EntityService


class CarrierService(EntityService[Carrier]):
    resource = "carrier"
    unique_fields = ("cid",)

    def __init__(self, repository: CarrierRepository, locality_repository: LocalityRepository):
        super().__init__(repository, dependencies=[
            DependencyRef("locality_id", "locality", locality_repository.get),
        ])
