"""
Account API endpoints.
Handles account opening, lookup, deposits, withdrawals and interest.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from banking.api.deps import get_account_service
from banking.domain.accounts import Account, AccountType
from banking.schemas.account import AccountCreate, AccountResponse, AmountRequest
from banking.services.account_service import AccountService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


def _get_account_or_404(account_service: AccountService, account_number: str) -> Account:
    account = account_service.get_account_by_number(account_number)

    if not account:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Account {account_number} not found"
        )

    return account


@router.post("/", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def open_account(
    account_data: AccountCreate,
    account_service: AccountService = Depends(get_account_service)
):
    """
    Open a new account for an existing customer.

    - **account_type**: SAVINGS, INVESTMENT (minimum BWP 500.00) or CHEQUE
    - **employer_name** / **employer_address**: cheque accounts only; when left out
      the customer's stored employment information is used
    """
    if account_data.account_type == AccountType.SAVINGS:
        account = account_service.create_savings_account(
            account_data.customer_id,
            account_data.account_number,
            account_data.initial_deposit,
            account_data.branch,
        )
    elif account_data.account_type == AccountType.INVESTMENT:
        account = account_service.create_investment_account(
            account_data.customer_id,
            account_data.account_number,
            account_data.initial_deposit,
            account_data.branch,
        )
    else:
        account = account_service.create_cheque_account(
            account_data.customer_id,
            account_data.account_number,
            account_data.initial_deposit,
            account_data.branch,
            employer_name=account_data.employer_name,
            employer_address=account_data.employer_address,
        )

    return AccountResponse.model_validate(account)


@router.get("/customer/{customer_id}", response_model=List[AccountResponse])
def get_customer_accounts(
    customer_id: int,
    account_service: AccountService = Depends(get_account_service)
):
    """
    List every account a customer holds.
    """
    accounts = account_service.get_customer_accounts(customer_id)
    return [AccountResponse.model_validate(account) for account in accounts]


@router.get("/{account_number}", response_model=AccountResponse)
def get_account(
    account_number: str,
    account_service: AccountService = Depends(get_account_service)
):
    """
    Get account details by account number.
    """
    return AccountResponse.model_validate(_get_account_or_404(account_service, account_number))


@router.post("/{account_number}/deposit", response_model=AccountResponse)
def deposit(
    account_number: str,
    request: AmountRequest,
    account_service: AccountService = Depends(get_account_service)
):
    """
    Deposit money into an account.
    """
    account = _get_account_or_404(account_service, account_number)
    return AccountResponse.model_validate(account_service.deposit(account, request.amount))


@router.post("/{account_number}/withdraw", response_model=AccountResponse)
def withdraw(
    account_number: str,
    request: AmountRequest,
    account_service: AccountService = Depends(get_account_service)
):
    """
    Withdraw money from an investment or cheque account.
    """
    account = _get_account_or_404(account_service, account_number)
    return AccountResponse.model_validate(account_service.withdraw(account, request.amount))


@router.post("/{account_number}/interest", response_model=AccountResponse)
def apply_monthly_interest(
    account_number: str,
    account_service: AccountService = Depends(get_account_service)
):
    """
    Credit one month of interest.
    """
    account = _get_account_or_404(account_service, account_number)
    return AccountResponse.model_validate(account_service.apply_monthly_interest(account))
