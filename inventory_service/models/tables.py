"""
Inventory database models
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, UniqueConstraint
from inventory_service.db.database import Base


class ProvinceRow(Base):
    """Province reference table"""
    __tablename__ = "provinces"

    id = Column(Integer, primary_key=True, index=True)
    province_name = Column(String(255), nullable=False)


class ProductTypeRow(Base):
    """Product type reference table"""
    __tablename__ = "product_types"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False)


class OrderStatusRow(Base):
    """Order status reference table"""
    __tablename__ = "order_statuses"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False)


class LocalityRow(Base):
    """Locality model"""
    __tablename__ = "localities"

    id = Column(Integer, primary_key=True, index=True)
    locality_name = Column(String(255), nullable=False, unique=True)
    province_id = Column(Integer, ForeignKey("provinces.id"), nullable=False)

    def __repr__(self):
        return f"<Locality(id={self.id}, name={self.locality_name})>"


class BuyerRow(Base):
    """Buyer model"""
    __tablename__ = "buyers"

    id = Column(Integer, primary_key=True, index=True)
    card_number_id = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Buyer(id={self.id}, card_number_id={self.card_number_id})>"


class WarehouseRow(Base):
    """Warehouse model"""
    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True, index=True)
    address = Column(String(255), nullable=False)
    telephone = Column(String(32), nullable=False)
    warehouse_code = Column(String(64), nullable=False, unique=True)
    minimum_capacity = Column(Integer, nullable=False)
    minimum_temperature = Column(Integer, nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False)

    def __repr__(self):
        return f"<Warehouse(id={self.id}, code={self.warehouse_code})>"


class EmployeeRow(Base):
    """Employee model"""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    card_number_id = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)

    def __repr__(self):
        return f"<Employee(id={self.id}, card_number_id={self.card_number_id})>"


class SectionRow(Base):
    """Section model"""
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, index=True)
    section_number = Column(Integer, nullable=False, unique=True)
    current_temperature = Column(Float, nullable=False)
    minimum_temperature = Column(Float, nullable=False)
    current_capacity = Column(Integer, nullable=False)
    minimum_capacity = Column(Integer, nullable=False)
    maximum_capacity = Column(Integer, nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    product_type_id = Column(Integer, ForeignKey("product_types.id"), nullable=False)

    def __repr__(self):
        return f"<Section(id={self.id}, number={self.section_number})>"


class SellerRow(Base):
    """Seller model"""
    __tablename__ = "sellers"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(Integer, nullable=False, unique=True)
    company_name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    telephone = Column(String(32), nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False)

    def __repr__(self):
        return f"<Seller(id={self.id}, cid={self.cid})>"


class ProductRow(Base):
    """Product model"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(500), nullable=False)
    expiration_rate = Column(Float, nullable=False)
    freezing_rate = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    length = Column(Float, nullable=False)
    netweight = Column(Float, nullable=False)
    product_code = Column(String(100), nullable=False, unique=True)
    recommended_freezing_temperature = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    product_type_id = Column(Integer, ForeignKey("product_types.id"), nullable=False)
    seller_id = Column(Integer, ForeignKey("sellers.id"), nullable=False)

    def __repr__(self):
        return f"<Product(id={self.id}, code={self.product_code})>"


class CarrierRow(Base):
    """Carrier model"""
    __tablename__ = "carriers"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(String(64), nullable=False, unique=True)
    company_name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    telephone = Column(String(32), nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False)

    def __repr__(self):
        return f"<Carrier(id={self.id}, cid={self.cid})>"


class ProductBatchRow(Base):
    """Product batch model"""
    __tablename__ = "product_batches"

    id = Column(Integer, primary_key=True, index=True)
    batch_number = Column(Integer, nullable=False, unique=True)
    current_quantity = Column(Integer, nullable=False)
    current_temperature = Column(Float, nullable=False)
    due_date = Column(DateTime, nullable=False)
    initial_quantity = Column(Integer, nullable=False)
    manufacturing_date = Column(DateTime, nullable=False)
    manufacturing_hour = Column(Integer, nullable=False)
    minimum_temperature = Column(Float, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False)

    def __repr__(self):
        return f"<ProductBatch(id={self.id}, number={self.batch_number})>"


class ProductRecordRow(Base):
    """Product record model"""
    __tablename__ = "product_records"
    __table_args__ = (UniqueConstraint("product_id", "last_update_date"),)

    id = Column(Integer, primary_key=True, index=True)
    last_update_date = Column(DateTime, nullable=False)
    purchase_price = Column(Float, nullable=False)
    sale_price = Column(Float, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    def __repr__(self):
        return f"<ProductRecord(id={self.id}, product_id={self.product_id})>"


class PurchaseOrderRow(Base):
    """Purchase order model"""
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String(255), nullable=False, unique=True)
    order_date = Column(DateTime, nullable=False)
    tracking_code = Column(String(255), nullable=False)
    buyer_id = Column(Integer, ForeignKey("buyers.id"), nullable=False)
    order_status_id = Column(Integer, ForeignKey("order_statuses.id"), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    product_record_id = Column(Integer, ForeignKey("product_records.id"), nullable=False)
    carrier_id = Column(Integer, ForeignKey("carriers.id"), nullable=False)

    def __repr__(self):
        return f"<PurchaseOrder(id={self.id}, number={self.order_number})>"


class InboundOrderRow(Base):
    """Inbound order model"""
    __tablename__ = "inbound_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(DateTime, nullable=False)
    order_number = Column(Integer, nullable=False, unique=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    product_batch_id = Column(Integer, ForeignKey("product_batches.id"), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)

    def __repr__(self):
        return f"<InboundOrder(id={self.id}, number={self.order_number})>"
