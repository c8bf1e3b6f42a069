"""Locality business logic"""
from typing import List, Optional, Union

from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import LocalityRepository, ProvinceRepository
from inventory_service.models.domain import CarriersByLocality, Locality, SellersByLocality
from inventory_service.services.base import EntityService


class LocalityService(EntityService[Locality]):
    """Localities are unique by name and belong to a province"""

    resource = "locality"
    unique_fields = ("locality_name",)

    def __init__(self, repository: LocalityRepository, province_repository: ProvinceRepository):
        super().__init__(repository, dependencies=[
            DependencyRef("province_id", "province", province_repository.get),
        ])

    def count_sellers(self, id: Optional[int] = None) -> Union[SellersByLocality, List[SellersByLocality]]:
        """Sellers per locality, or for one locality"""
        return self._report("count_sellers", self.repository.count_sellers, id)

    def count_carriers(self, id: Optional[int] = None) -> Union[CarriersByLocality, List[CarriersByLocality]]:
        """Carriers per locality, or for one locality"""
        return self._report("count_carriers", self.repository.count_carriers, id)
