"""
Loans Service - loan record management microservice

A FastAPI-based microservice that creates, fetches, updates and
deletes customer loans keyed by mobile number and loan number.
"""

__version__ = "0.1.0"
