"""POST/GET /api/time-deposits - time deposit registration and listing endpoints"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, status

from time_deposit.api.v1.schemas import CustomerDepositResponse, TimeDepositDetailResponse, TimeDepositRequest
from time_deposit.api.dependencies import get_registrar, get_reader, get_request_id
from time_deposit.domain.registrar import DepositRegistrar
from time_deposit.domain.reader import DepositReader
from time_deposit.domain.exceptions import AccountConflictError, CustomerAlreadyExistsError, DuplicateDepositError
from time_deposit.infrastructure.observability.metrics import record_registration, record_rejection
from time_deposit.infrastructure.observability.logging import log_registration

router = APIRouter()


@router.post("/time-deposits", response_model=CustomerDepositResponse, status_code=status.HTTP_201_CREATED)
def register_time_deposit(
    request_body: TimeDepositRequest,
    request: Request,
    registrar: DepositRegistrar = Depends(get_registrar),
):
    """
    Register a time deposit for a customer.

    Flow:
    1. Find the customer by account number, creating it on first deposit
    2. Reject a name mismatch or a same-day duplicate (409)
    3. Compute maturity date and interest, persist the deposit
    4. Return the customer with all of its deposits
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = registrar.register(request_body.to_domain())

    except AccountConflictError as e:
        record_rejection("account_conflict")
        logging.warning(f"Account conflict: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    except DuplicateDepositError as e:
        record_rejection("duplicate_deposit")
        logging.warning(f"Duplicate deposit: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    except CustomerAlreadyExistsError as e:
        record_rejection("customer_race")
        logging.warning(f"Customer creation race: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    except Exception:
        logging.exception("Unexpected error during registration", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_registration(registrar.created_customer, request_body.amount)
    log_registration(
        request_id,
        result.customer.account_number,
        result.customer.id,
        len(result.deposits),
        registrar.created_customer,
        duration_ms,
    )

    return CustomerDepositResponse.from_domain(result)


@router.get("/time-deposits", response_model=List[TimeDepositDetailResponse])
def list_time_deposits(reader: DepositReader = Depends(get_reader)):
    """
    List every registered deposit with its owner's account number and name.

    Returns:
        Possibly empty list of deposits in storage order
    """
    return [TimeDepositDetailResponse.from_domain(d) for d in reader.list_all()]
