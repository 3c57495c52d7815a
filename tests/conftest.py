import os

# Must be set before bookstore.config builds its settings
os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import bookstore.models  # noqa: F401
from bookstore.database import Base, get_db
from bookstore.main import app
from bookstore.schemas.book import BookCreate
from bookstore.schemas.customer import CustomerCreate
from bookstore.services.book_service import BookService
from bookstore.services.customer_service import CustomerService
from bookstore.services.order_service import OrderService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def book_service(db):
    return BookService(db)


@pytest.fixture
def customer_service(db):
    return CustomerService(db)


@pytest.fixture
def order_service(db):
    return OrderService(db)


def make_book(**overrides) -> BookCreate:
    data = {
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": "978-0441172719",
        "category": "Science Fiction",
        "price": Decimal("9.99"),
        "stock_quantity": 10,
        "description": "Desert planet.",
    }
    data.update(overrides)
    return BookCreate(**data)


def make_customer(**overrides) -> CustomerCreate:
    data = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@mail.com",
        "phone_number": "+44 (20) 7946-0000",
        "address": "12 St James's Square, London",
    }
    data.update(overrides)
    return CustomerCreate(**data)


@pytest.fixture
def customer(customer_service):
    return customer_service.create_customer(make_customer())


@pytest.fixture
def dune(book_service):
    return book_service.create_book(make_book())


@pytest.fixture
def neuromancer(book_service):
    return book_service.create_book(make_book(
        title="Neuromancer",
        author="William Gibson",
        isbn="978-0441569595",
        price=Decimal("14.50"),
        stock_quantity=3,
    ))
