"""
Pydantic schemas for Payment entity.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from vitsplit.models.payment import PaymentStatus


class PaymentCreate(BaseModel):
    """Schema for payment creation."""
    group_id: str
    from_user: str
    to_user: str
    amount: float
    currency: Optional[str] = None
    status: PaymentStatus = PaymentStatus.PENDING


class PaymentStatusUpdate(BaseModel):
    """Schema for payment status update."""
    status: PaymentStatus


class PaymentResponse(BaseModel):
    """Schema for payment response."""
    id: int
    group_id: str
    from_user: str
    to_user: str
    amount: float
    currency: str
    status: PaymentStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
