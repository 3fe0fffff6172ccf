"""
Payment model for money moved between group members.
"""
from sqlalchemy import Column, String, Float, Enum as SQLEnum
from vitsplit.db.base import BaseModel
import enum


class PaymentStatus(str, enum.Enum):
    """Payment status enumeration."""
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Payment(BaseModel):
    """A payment from one member to another, applied to the ledger once completed."""
    __tablename__ = "payments"

    group_id = Column(String(128), nullable=False, index=True)
    from_user = Column(String(128), nullable=False, index=True)
    to_user = Column(String(128), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    status = Column(SQLEnum(PaymentStatus), default=PaymentStatus.PENDING, nullable=False)
