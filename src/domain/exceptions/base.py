"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for business rule violations.

    Store outages and other infrastructure failures are never wrapped
    in a DomainException; they propagate as whatever the driver raised.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
