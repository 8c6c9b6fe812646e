import os

# database.py requires DATABASE_URL at import time.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.infrastructure.api.dependencies import get_invoice_repository, get_page_cache
from app.infrastructure.cache.in_memory_page_cache import InMemoryPageCache
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.invoice_repository_adapter import SQLInvoiceRepository
from app.infrastructure.persistence import models  # noqa: F401


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def page_cache():
    return InMemoryPageCache()


@pytest.fixture
def client(db_session, page_cache):
    from main import app

    app.dependency_overrides[get_invoice_repository] = lambda: SQLInvoiceRepository(db_session)
    app.dependency_overrides[get_page_cache] = lambda: page_cache
    yield TestClient(app)
    app.dependency_overrides.clear()
