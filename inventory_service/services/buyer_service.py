"""Buyer business logic"""
from inventory_service.db.repositories import BuyerRepository
from inventory_service.models.domain import Buyer
from inventory_service.services.base import EntityService


class BuyerService(EntityService[Buyer]):
    """Buyers are unique by card number and reference nothing"""

    resource = "buyer"
    unique_fields = ("card_number_id",)

    def __init__(self, repository: BuyerRepository):
        super().__init__(repository)
