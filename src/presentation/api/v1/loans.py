"""Loan lifecycle API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.application.dto import LoanUpdate
from src.application.services import LoanService
from src.core.dependencies import get_loan_service
from src.domain.exceptions import ResourceNotFoundException
from src.presentation.schemas import (
    MOBILE_NUMBER_PATTERN,
    ErrorResponseSchema,
    LoanResponseSchema,
    LoanUpdateSchema,
    StatusResponseSchema,
)

STATUS_201 = "201"
MESSAGE_201 = "Loan created successfully"
STATUS_200 = "200"
MESSAGE_200 = "Request processed successfully"
STATUS_417 = "417"
MESSAGE_417_UPDATE = "Update operation failed. Please try again or contact Dev team"
MESSAGE_417_DELETE = "Delete operation failed. Please try again or contact Dev team"

MobileNumber = Annotated[
    str,
    Query(
        alias="mobileNumber",
        pattern=MOBILE_NUMBER_PATTERN,
        description="Customer mobile number (10 digits)",
    ),
]

loans_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        500: {"model": ErrorResponseSchema, "description": "Internal Server Error"},
    },
)


def _status(status_code: str, message: str, http_status: int) -> JSONResponse:
    body = StatusResponseSchema(status_code=status_code, status_msg=message)
    return JSONResponse(
        status_code=http_status,
        content=body.model_dump(by_alias=True),
    )


@loans_router.post(
    "/create",
    response_model=StatusResponseSchema,
    status_code=201,
    summary="Create Loan",
    description="Create a new loan for a mobile number",
    responses={
        201: {"description": "Loan created"},
    },
)
async def create_loan(
    mobile_number: MobileNumber,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> JSONResponse:
    await loan_service.create_loan(mobile_number)
    return _status(STATUS_201, MESSAGE_201, 201)


@loans_router.get(
    "/fetch",
    response_model=LoanResponseSchema,
    summary="Fetch Loan Details",
    description="Fetch loan details based on a mobile number",
    responses={
        200: {"description": "Loan retrieved successfully"},
    },
)
async def fetch_loan_details(
    mobile_number: MobileNumber,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanResponseSchema:
    loan = await loan_service.fetch_loan(mobile_number)

    return LoanResponseSchema(
        loan_id=loan.loan_id,
        loan_number=loan.loan_number,
        mobile_number=loan.mobile_number,
        loan_type=loan.loan_type,
        total_loan=loan.total_loan,
        amount_paid=loan.amount_paid,
        outstanding_amount=loan.outstanding_amount,
    )


@loans_router.put(
    "/update",
    response_model=StatusResponseSchema,
    summary="Update Loan Details",
    description="Update loan details based on a loan number",
    responses={
        200: {"description": "Loan updated"},
        417: {"model": StatusResponseSchema, "description": "Expectation Failed"},
    },
)
async def update_loan_details(
    request: LoanUpdateSchema,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> JSONResponse:
    dto = LoanUpdate(
        loan_number=request.loan_number,
        loan_type=request.loan_type,
        total_loan=request.total_loan,
        amount_paid=request.amount_paid,
        outstanding_amount=request.outstanding_amount,
        mobile_number=request.mobile_number,
    )

    try:
        is_updated = await loan_service.update_loan(dto)
    except ResourceNotFoundException:
        is_updated = False

    if is_updated:
        return _status(STATUS_200, MESSAGE_200, 200)
    return _status(STATUS_417, MESSAGE_417_UPDATE, 417)


@loans_router.delete(
    "/delete",
    response_model=StatusResponseSchema,
    summary="Delete Loan Details",
    description="Delete loan details based on a mobile number",
    responses={
        200: {"description": "Loan deleted"},
        417: {"model": StatusResponseSchema, "description": "Expectation Failed"},
    },
)
async def delete_loan_details(
    mobile_number: MobileNumber,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> JSONResponse:
    try:
        is_deleted = await loan_service.delete_loan(mobile_number)
    except ResourceNotFoundException:
        is_deleted = False

    if is_deleted:
        return _status(STATUS_200, MESSAGE_200, 200)
    return _status(STATUS_417, MESSAGE_417_DELETE, 417)
