"""
Per-pair running ledger between two members of a group.
"""
from sqlalchemy import Column, String, Float, DateTime, func
from vitsplit.db.base import BaseModel


class GroupUserBalance(BaseModel):
    """
    Running totals between two users of one group.

    The pair is unordered: user_id is always the id that sorts first, so both
    directions share one row. net_balance is from user_id's side; negative
    means user_id owes other_user_id.
    """
    __tablename__ = "group_user_balances"

    doc_id = Column(String(400), unique=True, nullable=False, index=True)  # "{group}_{lo}_{hi}"
    group_id = Column(String(128), nullable=False, index=True)
    user_id = Column(String(128), nullable=False, index=True)
    other_user_id = Column(String(128), nullable=False, index=True)
    total_given = Column(Float, nullable=False, default=0)
    total_received = Column(Float, nullable=False, default=0)
    net_balance = Column(Float, nullable=False, default=0)
    last_updated = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
