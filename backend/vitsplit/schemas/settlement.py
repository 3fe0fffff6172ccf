"""
Pydantic schemas for the settlement engine.
"""
from pydantic import BaseModel
from typing import List


class Participant(BaseModel):
    """A person attached to an expense."""
    id: str
    name: str = ""
    amount_paid: float = 0  # What this participant contributed
    is_participating: bool = False  # Whether they owe a share


class ParticipantBalance(Participant):
    """Participant annotated with share and net balance."""
    share: float = 0
    balance: float = 0  # amount_paid - share; positive = is owed, negative = owes


class Settlement(BaseModel):
    """Schema for a single directed transfer."""
    from_id: str  # Debtor
    to_id: str  # Creditor
    amount: float
    description: str


class BalanceSummary(BaseModel):
    """Schema for balance calculator output."""
    total_expense: float = 0
    individual_share: float = 0
    participant_count: int = 0
    participants: List[ParticipantBalance] = []


class ExpenseSplitResult(BalanceSummary):
    """Schema for a full split: balances plus the settlement plan."""
    settlements: List[Settlement] = []


class SplitRequest(BaseModel):
    """Schema for split and balance calculation requests."""
    participants: List[Participant] = []
    strict: bool = True  # Reject malformed input instead of computing on it


class ReduceRequest(BaseModel):
    """Schema for settlement reduction requests."""
    participants: List[ParticipantBalance] = []
