"""
Sample customers, accounts and employees for a fresh database.

Loaded at startup when SEED_SAMPLE_DATA is set and the store is empty.
Everything goes in as one unit of work, so a failed load leaves the
store empty rather than half seeded.
"""

from banking.core.logger import get_logger
from banking.core.security import hash_password
from banking.database import session_scope
from banking.domain.accounts import AccountType
from banking.models import AccountModel, CustomerModel, EmployeeModel, UserModel

logger = get_logger(__name__)

SAMPLE_CUSTOMERS = [
    {
        "first_name": "Katlego", "last_name": "Sekgoma", "address": "Gaborone",
        "employment": ("Acme Corp", "Gaborone"),
        "username": "customer1", "password": "1234",
        "accounts": [
            ("CHK-001", 1200.0, "Main", AccountType.CHEQUE),
            ("INV-001", 1500.0, "Main", AccountType.INVESTMENT),
            ("SAV-001", 300.0, "Main", AccountType.SAVINGS),
        ],
    },
    {
        "first_name": "Alice", "last_name": "Moloi", "address": "Francistown",
        "employment": None,
        "username": "customer2", "password": "1234",
        "accounts": [
            ("INV-002", 800.0, "North", AccountType.INVESTMENT),
            ("SAV-002", 250.0, "North", AccountType.SAVINGS),
        ],
    },
    {
        "first_name": "Brian", "last_name": "Kgosietsile", "address": "Maun",
        "employment": ("Botswana Ltd", "Maun"),
        "username": "customer3", "password": "1234",
        "accounts": [
            ("CHK-002", 500.0, "West", AccountType.CHEQUE),
            ("INV-003", 700.0, "West", AccountType.INVESTMENT),
        ],
    },
    {
        "first_name": "Dineo", "last_name": "Modise", "address": "Gaborone",
        "employment": ("SmallBiz Pty", "Gaborone"),
        "username": "customer4", "password": "1234",
        "accounts": [
            ("SAV-003", 150.0, "Main", AccountType.SAVINGS),
            ("CHK-003", 400.0, "Main", AccountType.CHEQUE),
        ],
    },
]

SAMPLE_EMPLOYEES = [
    {
        "first_name": "John", "last_name": "Manager", "email": "john.manager@bank.com",
        "role": "MANAGER", "username": "employee1", "password": "emp123",
    },
    {
        "first_name": "Sarah", "last_name": "Teller", "email": "sarah.teller@bank.com",
        "role": "TELLER", "username": "admin", "password": "admin123",
    },
]


def seed_sample_data(session_factory) -> bool:
    """
    Insert the sample data unless customers or employees already exist.

    Returns True when data was inserted.
    """
    with session_scope(session_factory) as db:
        if db.query(CustomerModel).count() or db.query(EmployeeModel).count():
            logger.info("Store already has data, skipping sample data")
            return False

        for sample in SAMPLE_CUSTOMERS:
            employer_name, employer_address = sample["employment"] or (None, None)
            customer = CustomerModel(
                first_name=sample["first_name"],
                last_name=sample["last_name"],
                address=sample["address"],
                employer_name=employer_name,
                employer_address=employer_address,
            )
            db.add(customer)
            db.flush()

            db.add(UserModel(
                username=sample["username"],
                password_hash=hash_password(sample["password"]),
                customer_id=customer.id,
            ))
            for number, balance, branch, account_type in sample["accounts"]:
                is_cheque = account_type == AccountType.CHEQUE
                db.add(AccountModel(
                    account_number=number,
                    balance=balance,
                    branch=branch,
                    type=account_type.value,
                    customer_id=customer.id,
                    employer_name=employer_name if is_cheque else None,
                    employer_address=employer_address if is_cheque else None,
                ))
            db.flush()

        for sample in SAMPLE_EMPLOYEES:
            employee = EmployeeModel(
                first_name=sample["first_name"],
                last_name=sample["last_name"],
                email=sample["email"],
                role=sample["role"],
            )
            db.add(employee)
            db.flush()

            db.add(UserModel(
                username=sample["username"],
                password_hash=hash_password(sample["password"]),
                employee_id=employee.id,
            ))
            db.flush()

    logger.info(
        f"Loaded sample data: {len(SAMPLE_CUSTOMERS)} customers, "
        f"{sum(len(s['accounts']) for s in SAMPLE_CUSTOMERS)} accounts, {len(SAMPLE_EMPLOYEES)} employees"
    )
    return True
