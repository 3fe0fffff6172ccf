"""
Expense model for shared spending within a group.
"""
from sqlalchemy import Column, String, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from vitsplit.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single payment shared by group members."""
    __tablename__ = "expenses"

    group_id = Column(String(128), nullable=False, index=True)
    paid_by = Column(String(128), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    description = Column(Text, nullable=True)

    # Relationships
    participants = relationship(
        "ExpenseParticipant",
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by="ExpenseParticipant.id"
    )


class ExpenseParticipant(BaseModel):
    """A member sharing an expense and the share they owe."""
    __tablename__ = "expense_participants"

    expense_id = Column(Integer, ForeignKey("expenses.id"), nullable=False, index=True)
    user_id = Column(String(128), nullable=False, index=True)
    share_amount = Column(Float, nullable=False)

    # Relationships
    expense = relationship("Expense", back_populates="participants")
