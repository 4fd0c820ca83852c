"""Simple-interest and maturity calculation for fixed-term deposits"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from time_deposit.domain.models import MaturityQuote
from time_deposit.utils.date_utils import add_calendar_days

DAYS_PER_YEAR = Decimal("365")
RATE_PRECISION = Decimal("0.0000000001")  # 10 fractional digits
CURRENCY_PRECISION = Decimal("0.01")


def compute_maturity(
    principal: Decimal,
    annual_rate_percent: Decimal,
    term_days: int,
    application_date: date,
) -> MaturityQuote:
    """
    Compute maturity date and simple interest earned over the term.

    Requirements:
    - Maturity = application date + term days (calendar days)
    - Interest = principal * (rate / 100) * term_days / 365
    - Rate fraction carried to 10 digits, result rounded half-up to cents

    Example:
        1000.00 at 5.00% for 90 days
        1000 * 0.05 * 90 / 365 = 12.328767... → 12.33
    """
    rate_fraction = (Decimal(annual_rate_percent) / Decimal("100")).quantize(
        RATE_PRECISION, rounding=ROUND_HALF_UP
    )
    interest = Decimal(principal) * rate_fraction * Decimal(term_days) / DAYS_PER_YEAR

    return MaturityQuote(
        maturity_date=add_calendar_days(application_date, term_days),
        interest_earned=interest.quantize(CURRENCY_PRECISION, rounding=ROUND_HALF_UP),
    )
