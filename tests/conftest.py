"""
Shared fixtures: a fresh in-memory database per test plus the
repositories, services and API client built on top of it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from banking.database import build_engine, get_session_factory, init_db
from banking.main import app
from banking.repositories import AccountRepository, CustomerRepository, EmployeeRepository, UserRepository
from banking.services import AccountService, AuthService, CustomerService


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def account_repository(session_factory):
    return AccountRepository(session_factory)


@pytest.fixture
def customer_repository(session_factory):
    return CustomerRepository(session_factory)


@pytest.fixture
def employee_repository(session_factory):
    return EmployeeRepository(session_factory)


@pytest.fixture
def user_repository(session_factory):
    return UserRepository(session_factory)


@pytest.fixture
def account_service(account_repository, customer_repository):
    return AccountService(accounts=account_repository, customers=customer_repository)


@pytest.fixture
def customer_service(customer_repository, employee_repository):
    return CustomerService(customers=customer_repository, employees=employee_repository)


@pytest.fixture
def auth_service(user_repository, customer_repository, employee_repository):
    return AuthService(users=user_repository, customers=customer_repository, employees=employee_repository)


@pytest.fixture
def customer(customer_service):
    """A registered customer without employment information."""
    return customer_service.register_customer(
        first_name="Alice",
        last_name="Moloi",
        address="Francistown",
        username="alice",
        password="secret",
    )


@pytest.fixture
def employed_customer(customer_service):
    """A registered customer who may open cheque accounts."""
    return customer_service.register_customer(
        first_name="Katlego",
        last_name="Sekgoma",
        address="Gaborone",
        username="katlego",
        password="secret",
        employer_name="Acme Corp",
        employer_address="Gaborone",
    )


@pytest.fixture
def client(session_factory):
    """API client whose repositories use the test database."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()
