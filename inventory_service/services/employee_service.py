"""Employee business logic"""
from inventory_service.core.dependencies import DependencyRef
from inventory_service.db.repositories import EmployeeRepository, WarehouseRepository
from inventory_service.models.domain import Employee
from inventory_service.services.base import EntityService


class EmployeeService(EntityService[Employee]):
    """Employee service for business logic"""

    resource = "employee"
    unique_fields = ("card_number_id",)

    def __init__(self, repository: EmployeeRepository, warehouse_repository: WarehouseRepository):
        super().__init__(repository, dependencies=[
            DependencyRef("warehouse_id", "warehouse", warehouse_repository.get),
        ])
