"""Loan service - orchestrates the loan lifecycle use cases."""

import random
from typing import Optional

import structlog

from src.application.dto import LoanDetails, LoanUpdate
from src.core.metrics import record_loan_operation, track_operation_latency
from src.domain.entities import Loan, LoanType
from src.domain.exceptions import (
    LoanAlreadyExistsException,
    ResourceNotFoundException,
)
from src.domain.interfaces import LoanRepository
from .base import LoanService

logger = structlog.get_logger(__name__)


class DefaultLoanService(LoanService):
    """
    Application service for loan lifecycle use cases.

    Each call is a self-contained check-then-act against the repository;
    nothing is retried here.
    """

    def __init__(
        self,
        loan_repository: LoanRepository,
        new_loan_limit: int,
        default_loan_type: LoanType = LoanType.HOME,
        rng: Optional[random.Random] = None,
    ):
        self._loan_repo = loan_repository
        self._new_loan_limit = new_loan_limit
        self._default_loan_type = default_loan_type
        self._rng = rng

    async def create_loan(self, mobile_number: str) -> None:
        log = logger.bind(mobile_number=mobile_number)

        with track_operation_latency("create"):
            existing = await self._loan_repo.get_by_mobile_number(mobile_number)
            if existing is not None:
                log.warning("loan_already_exists", loan_number=existing.loan_number)
                record_loan_operation("create", "already_exists")
                raise LoanAlreadyExistsException(mobile_number)

            loan = Loan.new(
                mobile_number=mobile_number,
                total_loan=self._new_loan_limit,
                loan_type=self._default_loan_type,
                rng=self._rng,
            )
            saved = await self._loan_repo.save(loan)

        log.info(
            "loan_created",
            loan_id=saved.loan_id,
            loan_number=saved.loan_number,
            total_loan=saved.total_loan,
        )
        record_loan_operation("create")

    async def fetch_loan(self, mobile_number: str) -> LoanDetails:
        with track_operation_latency("fetch"):
            loan = await self._get_by_mobile_number("fetch", mobile_number)

        record_loan_operation("fetch")
        return LoanDetails.from_entity(loan)

    async def update_loan(self, update: LoanUpdate) -> bool:
        log = logger.bind(loan_number=update.loan_number)

        with track_operation_latency("update"):
            loan = await self._loan_repo.get_by_loan_number(update.loan_number)
            if loan is None:
                log.warning("loan_not_found", operation="update")
                record_loan_operation("update", "not_found")
                raise ResourceNotFoundException("Loan", "LoanNumber", update.loan_number)

            loan.apply_update(
                loan_type=update.loan_type,
                total_loan=update.total_loan,
                amount_paid=update.amount_paid,
                outstanding_amount=update.outstanding_amount,
            )
            await self._loan_repo.save(loan)

        log.info(
            "loan_updated",
            loan_id=loan.loan_id,
            outstanding_amount=loan.outstanding_amount,
            settled=loan.is_settled,
        )
        record_loan_operation("update")
        return True

    async def delete_loan(self, mobile_number: str) -> bool:
        with track_operation_latency("delete"):
            loan = await self._get_by_mobile_number("delete", mobile_number)
            await self._loan_repo.delete_by_id(loan.loan_id)

        logger.info(
            "loan_deleted",
            loan_id=loan.loan_id,
            loan_number=loan.loan_number,
            mobile_number=mobile_number,
        )
        record_loan_operation("delete")
        return True

    async def _get_by_mobile_number(self, operation: str, mobile_number: str) -> Loan:
        loan = await self._loan_repo.get_by_mobile_number(mobile_number)

        if loan is None:
            logger.warning(
                "loan_not_found",
                operation=operation,
                mobile_number=mobile_number,
            )
            record_loan_operation(operation, "not_found")
            raise ResourceNotFoundException("Loan", "mobileNumber", mobile_number)

        return loan
