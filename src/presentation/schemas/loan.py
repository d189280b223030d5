"""Loan-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MOBILE_NUMBER_PATTERN = r"^(|[0-9]{10})$"
LOAN_NUMBER_PATTERN = r"^(|[0-9]{12})$"

_camel_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
)


class LoanUpdateSchema(BaseModel):
    """Schema for PUT /api/update request body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "mobileNumber": "9876543210",
                    "loanNumber": "100045678912",
                    "loanType": "Home Loan",
                    "totalLoan": 100000,
                    "amountPaid": 25000,
                    "outstandingAmount": 75000,
                }
            ]
        },
    )

    mobile_number: str = Field(
        ...,
        min_length=1,
        pattern=MOBILE_NUMBER_PATTERN,
        description="Customer mobile number (10 digits)",
        examples=["9876543210"],
    )
    loan_number: str = Field(
        ...,
        min_length=1,
        pattern=LOAN_NUMBER_PATTERN,
        description="Loan number (12 digits)",
        examples=["100045678912"],
    )
    loan_type: str = Field(
        ...,
        min_length=1,
        description="Type of the loan",
        examples=["Home Loan"],
    )
    total_loan: int = Field(
        ...,
        gt=0,
        description="Total loan amount",
        examples=[100000],
    )
    amount_paid: int = Field(
        ...,
        ge=0,
        description="Total loan amount paid",
        examples=[25000],
    )
    outstanding_amount: int = Field(
        ...,
        ge=0,
        description="Total outstanding amount against a loan",
        examples=[75000],
    )


class LoanResponseSchema(BaseModel):
    """Schema for GET /api/fetch response body."""

    model_config = _camel_config

    loan_id: int = Field(..., description="Internal identifier of the loan")
    loan_number: str = Field(..., examples=["100045678912"])
    mobile_number: str = Field(..., examples=["9876543210"])
    loan_type: str = Field(..., examples=["Home Loan"])
    total_loan: int = Field(..., examples=[100000])
    amount_paid: int = Field(..., examples=[0])
    outstanding_amount: int = Field(..., examples=[100000])


class StatusResponseSchema(BaseModel):
    """Acknowledgement returned by the mutating endpoints."""

    model_config = _camel_config

    status_code: str = Field(..., examples=["200"])
    status_msg: str = Field(..., examples=["Request processed successfully"])
