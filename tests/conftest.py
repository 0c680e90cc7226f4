import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.base import Base

import models.orm_brand
import models.orm_personality
import models.orm_adjective
import models.orm_rule

from main import app
from api.deps import get_db
from models.orm_brand import BrandEntity


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def brand(db_session):
    b = BrandEntity(name="Acme")
    db_session.add(b)
    db_session.commit()
    db_session.refresh(b)
    return b


@pytest.fixture()
def client(db_session):
    def _get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override

    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
