"""Loan-related domain exceptions."""

from .base import DomainException


class ResourceNotFoundException(DomainException):
    """Raised when a lookup by a given field finds nothing."""

    def __init__(self, resource_name: str, field_name: str, field_value: str):
        super().__init__(
            message=(
                f"{resource_name} not found with the given input data "
                f"{field_name} : '{field_value}'"
            ),
            code="RESOURCE_NOT_FOUND",
        )
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value


class LoanAlreadyExistsException(DomainException):
    """Raised when a loan is already registered for a mobile number."""

    def __init__(self, mobile_number: str):
        super().__init__(
            message=f"Loan already registered with given mobileNumber: {mobile_number}",
            code="LOAN_ALREADY_EXISTS",
        )
        self.mobile_number = mobile_number
