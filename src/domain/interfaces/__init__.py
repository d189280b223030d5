"""
Domain Interfaces (Ports)
"""

from .repositories import LoanRepository

__all__ = [
    "LoanRepository",
]
