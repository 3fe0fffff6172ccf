"""Models package - Import all models for SQLAlchemy registration."""
from vitsplit.models.expense import Expense, ExpenseParticipant
from vitsplit.models.balance import GroupUserBalance
from vitsplit.models.payment import Payment, PaymentStatus

__all__ = [
    "Expense",
    "ExpenseParticipant",
    "GroupUserBalance",
    "Payment",
    "PaymentStatus",
]
