"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    group_id: str
    paid_by: str
    amount: float
    currency: Optional[str] = None  # Falls back to DEFAULT_CURRENCY
    description: Optional[str] = None
    participant_ids: List[str]  # User IDs who share this expense


class ExpenseParticipantResponse(BaseModel):
    """Schema for expense participant response."""
    user_id: str
    share_amount: float

    class Config:
        from_attributes = True


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: int
    group_id: str
    paid_by: str
    amount: float
    currency: str
    description: Optional[str] = None
    participants: List[ExpenseParticipantResponse] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
