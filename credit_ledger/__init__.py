"""
Credit Ledger - Account & Transaction Service

A FastAPI-based microservice that manages accounts with an available
credit limit and records the transactions that move it.
"""

__version__ = "0.1.0"
