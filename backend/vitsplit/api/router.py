"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from vitsplit.api.routes import settlements, expenses, balances, payments

api_router = APIRouter()

# Include all route modules
api_router.include_router(settlements.router)
api_router.include_router(expenses.router)
api_router.include_router(balances.router)
api_router.include_router(payments.router)
