"""
Repositories mapping table rows to domain entities
"""
import dataclasses
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from inventory_service.models import domain
from inventory_service.models import tables

E = TypeVar("E")


class SqlRepository(Generic[E]):
    """
    Shared CRUD for one table

    Subclasses set ``table``, ``entity`` and, when the table has a natural
    key, ``unique_columns``. ``exists`` takes a scalar for a single unique
    column and a tuple for a composite one.
    """

    table: Any = None
    entity: Any = None
    unique_columns: Tuple[str, ...] = ()

    def __init__(self, db: Session):
        self.db = db

    def _to_entity(self, row) -> E:
        return self.entity(**{f.name: getattr(row, f.name) for f in dataclasses.fields(self.entity)})

    def _row(self, id: int):
        return self.db.query(self.table).filter(self.table.id == id).first()

    def get_all(self) -> List[E]:
        rows = self.db.query(self.table).order_by(self.table.id).all()
        return [self._to_entity(row) for row in rows]

    def get(self, id: int) -> Optional[E]:
        row = self._row(id)
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, value) -> bool:
        if not self.unique_columns:
            raise TypeError(f"{type(self).__name__} has no unique columns")

        values = value if len(self.unique_columns) > 1 else (value,)
        query = self.db.query(self.table.id)
        for column, column_value in zip(self.unique_columns, values):
            query = query.filter(getattr(self.table, column) == column_value)

        return query.first() is not None

    def save(self, entity: E) -> int:
        data = dataclasses.asdict(entity)
        data.pop("id", None)

        row = self.table(**data)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row.id

    def update(self, entity: E) -> None:
        row = self._row(entity.id)
        for name, value in dataclasses.asdict(entity).items():
            if name != "id":
                setattr(row, name, value)
        self.db.commit()

    def delete(self, id: int) -> None:
        row = self._row(id)
        if row is not None:
            self.db.delete(row)
            self.db.commit()

    def _count_by(self, report, columns, child, child_key, id: Optional[int] = None) -> list:
        """
        Count the ``child`` rows pointing at each row of this table

        Parents without children are reported with a count of zero.
        """
        query = (
            self.db.query(*columns, func.count(child.id))
            .select_from(self.table)
            .outerjoin(child, child_key == self.table.id)
            .group_by(*columns)
            .order_by(self.table.id)
        )
        if id is not None:
            query = query.filter(self.table.id == id)

        return [report(*row) for row in query.all()]


class BuyerRepository(SqlRepository[domain.Buyer]):
    table = tables.BuyerRow
    entity = domain.Buyer
    unique_columns = ("card_number_id",)


class EmployeeRepository(SqlRepository[domain.Employee]):
    table = tables.EmployeeRow
    entity = domain.Employee
    unique_columns = ("card_number_id",)


class WarehouseRepository(SqlRepository[domain.Warehouse]):
    table = tables.WarehouseRow
    entity = domain.Warehouse
    unique_columns = ("warehouse_code",)


class SectionRepository(SqlRepository[domain.Section]):
    table = tables.SectionRow
    entity = domain.Section
    unique_columns = ("section_number",)

    def count_products(self, id: Optional[int] = None) -> List[domain.ProductsBySection]:
        """Product batches stored per section"""
        return self._count_by(
            domain.ProductsBySection,
            (tables.SectionRow.id, tables.SectionRow.section_number),
            tables.ProductBatchRow,
            tables.ProductBatchRow.section_id,
            id,
        )


class SellerRepository(SqlRepository[domain.Seller]):
    table = tables.SellerRow
    entity = domain.Seller
    unique_columns = ("cid",)


class ProductRepository(SqlRepository[domain.Product]):
    table = tables.ProductRow
    entity = domain.Product
    unique_columns = ("product_code",)

    def count_records(self, id: Optional[int] = None) -> List[domain.RecordsByProduct]:
        """Price records per product"""
        return self._count_by(
            domain.RecordsByProduct,
            (tables.ProductRow.id, tables.ProductRow.description),
            tables.ProductRecordRow,
            tables.ProductRecordRow.product_id,
            id,
        )


class LocalityRepository(SqlRepository[domain.Locality]):
    table = tables.LocalityRow
    entity = domain.Locality
    unique_columns = ("locality_name",)

    def count_sellers(self, id: Optional[int] = None) -> List[domain.SellersByLocality]:
        return self._count_by(
            domain.SellersByLocality,
            (tables.LocalityRow.id, tables.LocalityRow.locality_name),
            tables.SellerRow,
            tables.SellerRow.locality_id,
            id,
        )

    def count_carriers(self, id: Optional[int] = None) -> List[domain.CarriersByLocality]:
        return self._count_by(
            domain.CarriersByLocality,
            (tables.LocalityRow.id, tables.LocalityRow.locality_name),
            tables.CarrierRow,
            tables.CarrierRow.locality_id,
            id,
        )


class CarrierRepository(SqlRepository[domain.Carrier]):
    table = tables.CarrierRow
    entity = domain.Carrier
    unique_columns = ("cid",)


class ProductBatchRepository(SqlRepository[domain.ProductBatch]):
    table = tables.ProductBatchRow
    entity = domain.ProductBatch
    unique_columns = ("batch_number",)


class ProductRecordRepository(SqlRepository[domain.ProductRecord]):
    table = tables.ProductRecordRow
    entity = domain.ProductRecord
    unique_columns = ("product_id", "last_update_date")


class PurchaseOrderRepository(SqlRepository[domain.PurchaseOrder]):
    table = tables.PurchaseOrderRow
    entity = domain.PurchaseOrder
    unique_columns = ("order_number",)


class InboundOrderRepository(SqlRepository[domain.InboundOrder]):
    table = tables.InboundOrderRow
    entity = domain.InboundOrder
    unique_columns = ("order_number",)


# Lookup-only reference tables

class ProvinceRepository(SqlRepository[domain.Province]):
    table = tables.ProvinceRow
    entity = domain.Province


class ProductTypeRepository(SqlRepository[domain.ProductType]):
    table = tables.ProductTypeRow
    entity = domain.ProductType


class OrderStatusRepository(SqlRepository[domain.OrderStatus]):
    table = tables.OrderStatusRow
    entity = domain.OrderStatus
