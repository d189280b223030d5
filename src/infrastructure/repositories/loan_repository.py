"""PostgreSQL repository implementation for loans."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Loan
from src.domain.interfaces import LoanRepository
from src.infrastructure.database.models import LoanModel


class PostgresLoanRepository(LoanRepository):
    """PostgreSQL-backed loan repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Loan]:
        stmt = select(LoanModel).where(LoanModel.mobile_number == mobile_number)
        return await self._fetch_one(stmt)

    async def get_by_loan_number(self, loan_number: str) -> Optional[Loan]:
        stmt = select(LoanModel).where(LoanModel.loan_number == loan_number)
        return await self._fetch_one(stmt)

    async def save(self, loan: Loan) -> Loan:
        if loan.loan_id is None:
            model = LoanModel(
                loan_number=loan.loan_number,
                mobile_number=loan.mobile_number,
                loan_type=loan.loan_type,
                total_loan=loan.total_loan,
                amount_paid=loan.amount_paid,
                outstanding_amount=loan.outstanding_amount,
            )
            self._session.add(model)
        else:
            model = await self._session.get(LoanModel, loan.loan_id)
            if model is None:
                raise LookupError(f"Loan row {loan.loan_id} vanished before update")

            model.mobile_number = loan.mobile_number
            model.loan_type = loan.loan_type
            model.total_loan = loan.total_loan
            model.amount_paid = loan.amount_paid
            model.outstanding_amount = loan.outstanding_amount

        await self._session.flush()
        # Pull server/ORM-generated values (id, audit columns) back in
        await self._session.refresh(model)

        return self._to_entity(model)

    async def delete_by_id(self, loan_id: int) -> None:
        model = await self._session.get(LoanModel, loan_id)
        if model is None:
            return

        await self._session.delete(model)
        await self._session.flush()

    async def _fetch_one(self, stmt) -> Optional[Loan]:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: LoanModel) -> Loan:
        return Loan(
            loan_id=model.loan_id,
            loan_number=model.loan_number,
            mobile_number=model.mobile_number,
            loan_type=model.loan_type,
            total_loan=model.total_loan,
            amount_paid=model.amount_paid,
            outstanding_amount=model.outstanding_amount,
            created_at=model.created_at,
            created_by=model.created_by,
            updated_at=model.updated_at,
            updated_by=model.updated_by,
        )
