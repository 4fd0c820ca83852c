"""Read-only reporting over all registered deposits"""

from typing import List
from time_deposit.domain.models import DepositDetail
from time_deposit.domain.ports import UnitOfWork


class DepositReader:
    """Lists every deposit joined with its owning customer"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def list_all(self) -> List[DepositDetail]:
        """All deposits in storage order; empty list when none exist"""
        return list(self.uow.deposits.find_all_deposits())
