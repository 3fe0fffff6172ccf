"""
Pydantic schemas for the per-pair ledger.
"""
from pydantic import BaseModel
from typing import Dict, List
from datetime import datetime
from vitsplit.schemas.settlement import Settlement


class BalanceRecordResponse(BaseModel):
    """Schema for a ledger record between two users."""
    doc_id: str
    group_id: str
    user_id: str
    other_user_id: str
    total_given: float
    total_received: float
    net_balance: float
    last_updated: datetime

    class Config:
        from_attributes = True


class BalanceBetweenUsersResponse(BalanceRecordResponse):
    """Ledger record seen from a requested pair of users."""
    user1_balance: float  # Positive = user1 is owed money
    user2_balance: float


class GroupBalancesResponse(BaseModel):
    """Schema for aggregated per-user positions in a group."""
    group_id: str
    balances: Dict[str, float]  # user_id -> net (positive = is owed)


class GroupSettlementsResponse(BaseModel):
    """Schema for a simplified settlement plan for a group."""
    group_id: str
    settlements: List[Settlement]
