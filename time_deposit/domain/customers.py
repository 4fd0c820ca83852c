"""Find-or-create resolution of the customer owning an account number"""

import logging
from dataclasses import dataclass
from time_deposit.domain.exceptions import AccountConflictError
from time_deposit.domain.models import Customer
from time_deposit.domain.ports import CustomerStore

logger = logging.getLogger(__name__)


@dataclass
class ResolvedCustomer:
    """Customer plus whether this request created it"""

    customer: Customer
    created: bool


def resolve_customer(customers: CustomerStore, account_number: str, customer_name: str) -> ResolvedCustomer:
    """
    Return the customer bound to account_number, creating it if absent.

    The stored name must equal customer_name exactly (no trimming or case
    folding). An existing customer is never updated.

    Raises:
        AccountConflictError: account number is bound to a different name
        CustomerAlreadyExistsError: a concurrent transaction created it first
    """
    # Row lock serializes registrations for the same account until commit
    existing = customers.find_customer_by_account_number(account_number, for_update=True)

    if existing is None:
        created = customers.save_customer(Customer(account_number=account_number, customer_name=customer_name))
        logger.info("Customer created", extra={"account_number": account_number, "customer_id": created.id})
        return ResolvedCustomer(customer=created, created=True)

    if existing.customer_name != customer_name:
        logger.warning("Account number bound to a different name", extra={"account_number": account_number})
        raise AccountConflictError(account_number)

    return ResolvedCustomer(customer=existing, created=False)
