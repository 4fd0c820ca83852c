"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from time_deposit.domain.reader import DepositReader
from time_deposit.domain.registrar import DepositRegistrar
from time_deposit.infrastructure.database.session import get_db
from time_deposit.infrastructure.database.unit_of_work import SqlAlchemyUnitOfWork


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_unit_of_work(db: Session = Depends(get_db)) -> SqlAlchemyUnitOfWork:
    """Provide a unit of work bound to the request's session"""
    return SqlAlchemyUnitOfWork(db)


def get_registrar(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)) -> DepositRegistrar:
    """Provide a deposit registrar for one request"""
    return DepositRegistrar(uow)


def get_reader(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)) -> DepositReader:
    """Provide a read-only deposit reader"""
    return DepositReader(uow)
