"""Same-day duplicate deposit detection"""

import logging
from datetime import date
from decimal import Decimal
from time_deposit.domain.exceptions import DuplicateDepositError
from time_deposit.domain.ports import DepositStore

logger = logging.getLogger(__name__)


def check_duplicate(
    deposits: DepositStore,
    account_number: str,
    amount: Decimal,
    interest_rate: Decimal,
    term_days: int,
    today: date,
) -> bool:
    """
    True if the account already holds a deposit registered today with the
    same amount, rate and term.

    Decimal comparison is numeric, so 1000 matches 1000.00.
    """
    return any(
        deposit.amount == amount
        and deposit.interest_rate == interest_rate
        and deposit.term_days == term_days
        and deposit.application_date == today
        for deposit in deposits.find_deposits_by_account_number(account_number)
    )


def ensure_not_duplicate(
    deposits: DepositStore,
    account_number: str,
    amount: Decimal,
    interest_rate: Decimal,
    term_days: int,
    today: date,
) -> None:
    """Raise DuplicateDepositError if check_duplicate finds a match"""
    if check_duplicate(deposits, account_number, amount, interest_rate, term_days, today):
        logger.warning("Duplicate deposit detected", extra={"account_number": account_number})
        raise DuplicateDepositError(account_number)
