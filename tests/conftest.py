import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_service.db.database import Base, get_db
from inventory_service.main import app
from inventory_service.models import tables


@pytest.fixture()
def engine():
    # One shared in-memory connection per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def reference_data(db):
    """Rows the write endpoints cannot create themselves"""
    db.add_all([
        tables.ProvinceRow(id=1, province_name="São Paulo"),
        tables.LocalityRow(id=1, locality_name="Campinas", province_id=1),
        tables.ProductTypeRow(id=1, description="Frozen"),
        tables.OrderStatusRow(id=1, description="Pending"),
    ])
    db.commit()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
