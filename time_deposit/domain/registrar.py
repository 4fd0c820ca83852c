"""Deposit registration workflow - core business logic for opening time deposits"""

import logging
from datetime import date
from typing import Callable
from time_deposit.config import settings
from time_deposit.domain.customers import resolve_customer
from time_deposit.domain.duplicates import ensure_not_duplicate
from time_deposit.domain.exceptions import CustomerAlreadyExistsError
from time_deposit.domain.interest import compute_maturity
from time_deposit.domain.models import ACTIVE_STATUS, CustomerDeposits, DepositRequest, TimeDeposit
from time_deposit.domain.ports import UnitOfWork

logger = logging.getLogger(__name__)


class DepositRegistrar:
    """Registers a deposit and its (possibly new) owner in one unit of work"""

    def __init__(
        self,
        uow: UnitOfWork,
        today: Callable[[], date] = date.today,
        max_attempts: int | None = None,
    ):
        self.uow = uow
        self.today = today
        self.max_attempts = max_attempts if max_attempts is not None else settings.registration_max_attempts
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        self.created_customer = False

    def register(self, request: DepositRequest) -> CustomerDeposits:
        """
        Register a new time deposit.

        Flow:
        1. Resolve (or create) the customer for the account number
        2. Reject same-day duplicates for pre-existing customers
        3. Compute maturity date and interest earned
        4. Persist the deposit
        5. Return the customer with all of its deposits

        Everything commits together or not at all. If a concurrent request
        creates the same customer first, the whole registration is retried,
        at which point the customer is found as existing.

        Raises:
            AccountConflictError: account number bound to a different name
            DuplicateDepositError: identical deposit already registered today
            CustomerAlreadyExistsError: customer race persisted past max_attempts
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                result = self._register_once(request)
                self.uow.commit()
                return result

            except CustomerAlreadyExistsError:
                self.uow.rollback()
                if attempt >= self.max_attempts:
                    raise
                logger.info(
                    "Customer created concurrently, retrying registration",
                    extra={"account_number": request.account_number, "attempt": attempt},
                )

            except Exception:
                self.uow.rollback()
                raise

    def _register_once(self, request: DepositRequest) -> CustomerDeposits:
        resolved = resolve_customer(self.uow.customers, request.account_number, request.customer_name)
        customer = resolved.customer
        self.created_customer = resolved.created

        application_date = self.today()

        # A customer created by this request cannot hold deposits yet
        if not resolved.created:
            ensure_not_duplicate(
                self.uow.deposits,
                request.account_number,
                request.amount,
                request.interest_rate,
                request.term_days,
                application_date,
            )

        quote = compute_maturity(request.amount, request.interest_rate, request.term_days, application_date)

        self.uow.deposits.save_deposit(
            TimeDeposit(
                customer_id=customer.id,
                amount=request.amount,
                interest_rate=request.interest_rate,
                term_days=request.term_days,
                application_date=application_date,
                maturity_date=quote.maturity_date,
                interest_earned=quote.interest_earned,
                status=ACTIVE_STATUS,
            )
        )

        return CustomerDeposits(
            customer=customer,
            deposits=self.uow.deposits.find_deposits_by_account_number(customer.account_number),
        )
