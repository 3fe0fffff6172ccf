"""
Expense service for expense-related business logic.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from vitsplit.core.config import settings
from vitsplit.models.expense import Expense, ExpenseParticipant
from vitsplit.services.group_balance_service import update_balances_for_expense

logger = logging.getLogger(__name__)


def create_expense(
    group_id: str,
    paid_by: str,
    amount: float,
    participant_ids: List[str],
    description: Optional[str] = None,
    currency: Optional[str] = None,
    db: Session = None
) -> Expense:
    """Create an expense, record equal shares, and update the group ledger."""
    if not group_id or not paid_by:
        raise ValueError("group_id and paid_by are required")
    if amount is None or amount <= 0:
        raise ValueError("Expense amount must be positive")

    # Keep first occurrence order, drop repeats
    participant_ids = list(dict.fromkeys(participant_ids or []))
    if not participant_ids:
        raise ValueError("An expense needs at least one participant")

    expense = Expense(
        group_id=group_id,
        paid_by=paid_by,
        amount=amount,
        currency=(currency or settings.DEFAULT_CURRENCY).upper(),
        description=description
    )
    db.add(expense)
    db.flush()

    share_per_person = amount / len(participant_ids)
    for user_id in participant_ids:
        expense.participants.append(ExpenseParticipant(
            expense_id=expense.id,
            user_id=user_id,
            share_amount=share_per_person
        ))
    db.flush()

    try:
        settlements = update_balances_for_expense(expense, db)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Created expense {expense.id} in group {group_id} with {len(settlements)} ledger posting(s)")
    db.refresh(expense)
    return expense


def get_expenses_by_group_id(group_id: str, db: Session) -> List[Expense]:
    """Get all expenses for a group, newest first."""
    return db.query(Expense).filter(
        Expense.group_id == group_id
    ).order_by(Expense.created_at.desc(), Expense.id.desc()).all()
