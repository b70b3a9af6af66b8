"""
API tests for the Banking Records Service.
Tests registration, login, account operations and error handling.
"""

import pytest

PREFIX = "/api/v1"


def register(client, username="alice", **overrides):
    payload = {
        "first_name": "Alice",
        "last_name": "Moloi",
        "address": "Francistown",
        "username": username,
        "password": "secret",
    }
    payload.update(overrides)
    return client.post(f"{PREFIX}/customers/", json=payload)


def open_account(client, customer_id, account_number, account_type, initial_deposit, **extra):
    payload = {
        "customer_id": customer_id,
        "account_number": account_number,
        "account_type": account_type,
        "initial_deposit": initial_deposit,
        "branch": "Main",
    }
    payload.update(extra)
    return client.post(f"{PREFIX}/accounts/", json=payload)


def post_raw(client, path, body):
    """Send a body the json= helper would refuse to encode, such as a bare NaN."""
    return client.post(f"{PREFIX}{path}", content=body, headers={"Content-Type": "application/json"})


@pytest.fixture
def customer_id(client):
    return register(client).json()["id"]


# ==================== HEALTH CHECK TESTS ====================

def test_root_endpoint(client):
    """Test root endpoint returns correct response."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "running"
    assert "Banking Records Service" in data["message"]


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# ==================== CUSTOMER TESTS ====================

def test_register_customer(client):
    """Test registering a new customer."""
    response = register(client, employer_name="Acme Corp", employer_address="Gaborone")
    assert response.status_code == 201
    data = response.json()
    assert data["first_name"] == "Alice"
    assert data["has_employment_info"] is True
    assert data["accounts"] == []
    assert "password" not in data


def test_register_duplicate_username(client):
    """Test that a taken username is rejected and nothing is left behind."""
    register(client)

    response = register(client, first_name="Dineo")
    assert response.status_code == 409

    customers = client.get(f"{PREFIX}/customers/").json()
    assert len(customers) == 1


def test_register_missing_fields(client):
    """Test that blank names are rejected by request validation."""
    response = register(client, first_name="")
    assert response.status_code == 422


def test_get_customer(client, customer_id):
    response = client.get(f"{PREFIX}/customers/{customer_id}")
    assert response.status_code == 200
    assert response.json()["last_name"] == "Moloi"


def test_get_nonexistent_customer(client):
    response = client.get(f"{PREFIX}/customers/999")
    assert response.status_code == 404


def test_update_employment(client, customer_id):
    response = client.put(
        f"{PREFIX}/customers/{customer_id}/employment",
        json={"employer_name": "Acme Corp", "employer_address": "Gaborone"}
    )
    assert response.status_code == 200
    assert response.json()["has_employment_info"] is True


def test_delete_customer(client, customer_id):
    """Test deleting a customer removes their accounts and login."""
    open_account(client, customer_id, "SAV-001", "SAVINGS", 100.0)

    response = client.delete(f"{PREFIX}/customers/{customer_id}")
    assert response.status_code == 204

    assert client.get(f"{PREFIX}/customers/{customer_id}").status_code == 404
    assert client.get(f"{PREFIX}/accounts/SAV-001").status_code == 404
    login = client.post(f"{PREFIX}/auth/login", json={"username": "alice", "password": "secret"})
    assert login.status_code == 401


# ==================== LOGIN TESTS ====================

def test_customer_login(client, customer_id):
    open_account(client, customer_id, "SAV-001", "SAVINGS", 100.0)

    response = client.post(f"{PREFIX}/auth/login", json={"username": "alice", "password": "secret"})
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "customer"
    assert data["customer"]["id"] == customer_id
    assert data["customer"]["accounts"][0]["account_number"] == "SAV-001"
    assert data["employee"] is None


def test_employee_login(client, customer_service):
    customer_service.register_employee("Sarah", "Teller", "sarah.teller@bank.com", "TELLER", "admin", "admin123")

    response = client.post(f"{PREFIX}/auth/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "employee"
    assert data["employee"]["role"] == "TELLER"


def test_login_wrong_password(client, customer_id):
    response = client.post(f"{PREFIX}/auth/login", json={"username": "alice", "password": "nope"})
    assert response.status_code == 401


# ==================== ACCOUNT TESTS ====================

def test_open_savings_account(client, customer_id):
    response = open_account(client, customer_id, "SAV-001", "SAVINGS", 250.0)
    assert response.status_code == 201
    data = response.json()
    assert data["account_type"] == "SAVINGS"
    assert data["balance"] == 250.0
    assert data["employer_name"] is None


def test_open_investment_below_minimum(client, customer_id):
    response = open_account(client, customer_id, "INV-001", "INVESTMENT", 499.99)
    assert response.status_code == 400
    assert "500.00" in response.json()["detail"]


def test_open_investment_at_minimum(client, customer_id):
    response = open_account(client, customer_id, "INV-001", "INVESTMENT", 500.0)
    assert response.status_code == 201


def test_open_cheque_without_employment(client, customer_id):
    response = open_account(client, customer_id, "CHK-001", "CHEQUE", 100.0)
    assert response.status_code == 400
    assert "employment information" in response.json()["detail"]


def test_open_cheque_with_employment_backfills(client, customer_id):
    response = open_account(
        client, customer_id, "CHK-001", "CHEQUE", 100.0,
        employer_name="Botswana Ltd", employer_address="Maun",
    )
    assert response.status_code == 201
    assert response.json()["employer_name"] == "Botswana Ltd"

    customer = client.get(f"{PREFIX}/customers/{customer_id}").json()
    assert customer["employer_name"] == "Botswana Ltd"
    assert customer["has_employment_info"] is True


def test_open_account_unknown_customer(client):
    response = open_account(client, 999, "SAV-001", "SAVINGS", 1.0)
    assert response.status_code == 400


def test_open_account_unknown_type(client, customer_id):
    response = open_account(client, customer_id, "LOAN-001", "LOAN", 1.0)
    assert response.status_code == 422


@pytest.mark.parametrize("initial_deposit", ["NaN", "Infinity"])
def test_open_account_non_finite_deposit(client, customer_id, initial_deposit):
    body = (
        f'{{"customer_id": {customer_id}, "account_number": "SAV-001", '
        f'"account_type": "SAVINGS", "initial_deposit": {initial_deposit}}}'
    )
    response = post_raw(client, "/accounts/", body)
    assert response.status_code == 422
    assert client.get(f"{PREFIX}/accounts/customer/{customer_id}").json() == []


def test_get_nonexistent_account(client):
    response = client.get(f"{PREFIX}/accounts/NONEXISTENT")
    assert response.status_code == 404


def test_get_customer_accounts(client, customer_id):
    open_account(client, customer_id, "SAV-001", "SAVINGS", 1.0)
    open_account(client, customer_id, "INV-001", "INVESTMENT", 600.0)

    response = client.get(f"{PREFIX}/accounts/customer/{customer_id}")
    assert response.status_code == 200
    assert len(response.json()) == 2


# ==================== BALANCE OPERATION TESTS ====================

def test_deposit(client, customer_id):
    open_account(client, customer_id, "SAV-001", "SAVINGS", 100.0)

    response = client.post(f"{PREFIX}/accounts/SAV-001/deposit", json={"amount": 50.0})
    assert response.status_code == 200
    assert response.json()["balance"] == 150.0

    assert client.get(f"{PREFIX}/accounts/SAV-001").json()["balance"] == 150.0


def test_deposit_non_positive(client, customer_id):
    open_account(client, customer_id, "SAV-001", "SAVINGS", 100.0)

    response = client.post(f"{PREFIX}/accounts/SAV-001/deposit", json={"amount": 0})
    assert response.status_code == 400
    assert client.get(f"{PREFIX}/accounts/SAV-001").json()["balance"] == 100.0


@pytest.mark.parametrize("operation", ["deposit", "withdraw"])
@pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_amount_rejected(client, customer_id, operation, amount):
    open_account(client, customer_id, "INV-001", "INVESTMENT", 800.0)

    response = post_raw(client, f"/accounts/INV-001/{operation}", f'{{"amount": {amount}}}')
    assert response.status_code == 422
    assert client.get(f"{PREFIX}/accounts/INV-001").json()["balance"] == 800.0


def test_withdraw_from_savings(client, customer_id):
    """Test that savings withdrawals are refused as unsupported."""
    open_account(client, customer_id, "SAV-001", "SAVINGS", 100.0)

    response = client.post(f"{PREFIX}/accounts/SAV-001/withdraw", json={"amount": 10.0})
    assert response.status_code == 409
    assert "Savings" in response.json()["detail"]


def test_withdraw_from_investment(client, customer_id):
    open_account(client, customer_id, "INV-001", "INVESTMENT", 800.0)

    response = client.post(f"{PREFIX}/accounts/INV-001/withdraw", json={"amount": 300.0})
    assert response.status_code == 200
    assert response.json()["balance"] == 500.0


def test_withdraw_insufficient_funds(client, customer_id):
    open_account(client, customer_id, "INV-001", "INVESTMENT", 800.0)

    response = client.post(f"{PREFIX}/accounts/INV-001/withdraw", json={"amount": 800.01})
    assert response.status_code == 400
    assert "Insufficient funds" in response.json()["detail"]
    assert client.get(f"{PREFIX}/accounts/INV-001").json()["balance"] == 800.0


def test_monthly_interest(client, customer_id):
    open_account(client, customer_id, "INV-001", "INVESTMENT", 1000.0)
    open_account(client, customer_id, "SAV-001", "SAVINGS", 1000.0)

    investment = client.post(f"{PREFIX}/accounts/INV-001/interest").json()
    savings = client.post(f"{PREFIX}/accounts/SAV-001/interest").json()

    assert investment["balance"] == pytest.approx(1050.0)
    assert savings["balance"] == pytest.approx(1000.5)


def test_operation_on_nonexistent_account(client):
    response = client.post(f"{PREFIX}/accounts/NONEXISTENT/deposit", json={"amount": 10.0})
    assert response.status_code == 404
