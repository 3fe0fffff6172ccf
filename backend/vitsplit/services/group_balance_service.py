"""
Group balance service: per-pair ledger records between group members.
"""
import logging
from typing import Dict, List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from vitsplit.core.utils import round_money
from vitsplit.models.balance import GroupUserBalance
from vitsplit.models.expense import Expense
from vitsplit.schemas.balance import BalanceRecordResponse, BalanceBetweenUsersResponse
from vitsplit.schemas.settlement import Participant, ParticipantBalance, Settlement
from vitsplit.services.settlement_service import calculate_expense_split, generate_settlements

logger = logging.getLogger(__name__)


def get_balance_doc_id(group_id: str, user_id: str, other_user_id: str) -> str:
    """Build the record key; the same for either argument order."""
    low, high = sorted([user_id, other_user_id])
    return f"{group_id}_{low}_{high}"


def get_or_create_balance_record(
    group_id: str,
    user_id: str,
    other_user_id: str,
    db: Session
) -> GroupUserBalance:
    """Get the ledger record for a pair, creating an empty one if missing."""
    if not group_id or not user_id or not other_user_id:
        raise ValueError("Missing required parameters")

    doc_id = get_balance_doc_id(group_id, user_id, other_user_id)
    record = db.query(GroupUserBalance).filter(GroupUserBalance.doc_id == doc_id).first()
    if record:
        return record

    low, high = sorted([user_id, other_user_id])
    record = GroupUserBalance(
        doc_id=doc_id,
        group_id=group_id,
        user_id=low,
        other_user_id=high,
        total_given=0,
        total_received=0,
        net_balance=0
    )
    db.add(record)
    db.flush()
    return record


def update_balance(
    group_id: str,
    from_user_id: str,
    to_user_id: str,
    amount: float,
    db: Session
) -> GroupUserBalance:
    """
    Record that from_user_id owes to_user_id `amount` more.

    A negative amount reduces the debt, which is how payments are posted.
    The caller commits.
    """
    if not group_id or not from_user_id or not to_user_id or amount is None:
        raise ValueError("Missing required parameters")
    if from_user_id == to_user_id:
        raise ValueError("Cannot record a balance between a user and themselves")

    record = get_or_create_balance_record(group_id, from_user_id, to_user_id, db)

    if record.user_id == from_user_id:
        record.total_given += amount
        record.net_balance -= amount
    else:
        record.total_received += amount
        record.net_balance += amount

    db.flush()
    logger.info(f"Ledger {record.doc_id}: {from_user_id} -> {to_user_id} {amount:+.2f}, net {record.net_balance:.2f}")
    return record


def get_balance_records_for_group(group_id: str, db: Session) -> List[GroupUserBalance]:
    """Get all ledger records for a group."""
    if not group_id:
        return []
    return db.query(GroupUserBalance).filter(
        GroupUserBalance.group_id == group_id
    ).order_by(GroupUserBalance.doc_id).all()


def get_balance_records_for_user_in_group(
    group_id: str,
    user_id: str,
    db: Session
) -> List[GroupUserBalance]:
    """Get ledger records in a group where the user is on either side."""
    if not group_id or not user_id:
        return []
    return db.query(GroupUserBalance).filter(
        GroupUserBalance.group_id == group_id,
        or_(GroupUserBalance.user_id == user_id, GroupUserBalance.other_user_id == user_id)
    ).order_by(GroupUserBalance.doc_id).all()


def get_balance_between_users(
    group_id: str,
    user_id1: str,
    user_id2: str,
    db: Session
) -> Optional[BalanceBetweenUsersResponse]:
    """Get the ledger record for a pair seen from user_id1's side, or None."""
    if not group_id or not user_id1 or not user_id2:
        return None

    doc_id = get_balance_doc_id(group_id, user_id1, user_id2)
    record = db.query(GroupUserBalance).filter(GroupUserBalance.doc_id == doc_id).first()
    if not record:
        return None

    user1_balance = record.net_balance if record.user_id == user_id1 else -record.net_balance
    return BalanceBetweenUsersResponse(
        **BalanceRecordResponse.model_validate(record).model_dump(),
        user1_balance=user1_balance,
        user2_balance=-user1_balance
    )


def update_balances_for_expense(expense: Expense, db: Session) -> List[Settlement]:
    """Split an expense and post the resulting transfers to the ledger."""
    if not expense or not expense.group_id or not expense.paid_by or not expense.participants or not expense.amount:
        raise ValueError("Invalid expense")

    participant_ids = [p.user_id for p in expense.participants]
    participants = [
        Participant(
            id=user_id,
            name=user_id,
            amount_paid=expense.amount if user_id == expense.paid_by else 0,
            is_participating=True
        )
        for user_id in participant_ids
    ]

    if expense.paid_by not in participant_ids:
        # The payer only funded the expense; their credit is not split
        logger.warning(f"Payer {expense.paid_by} is not a participant of expense {expense.id}")
        participants.append(Participant(
            id=expense.paid_by,
            name=expense.paid_by,
            amount_paid=expense.amount,
            is_participating=False
        ))

    result = calculate_expense_split(participants)

    for settlement in result.settlements:
        logger.debug(f"Posting settlement: {settlement.description}")
        update_balance(expense.group_id, settlement.from_id, settlement.to_id, settlement.amount, db)

    return result.settlements


def update_balances_for_payment(
    group_id: str,
    from_user_id: str,
    to_user_id: str,
    amount: float,
    db: Session
) -> GroupUserBalance:
    """Post a payment; it reduces what the payer owes the receiver."""
    if not group_id or not from_user_id or not to_user_id or amount is None:
        raise ValueError("Missing required parameters")
    return update_balance(group_id, from_user_id, to_user_id, -amount, db)


def calculate_group_balances(group_id: str, db: Session) -> Dict[str, float]:
    """Aggregate each user's net position in a group (positive = is owed)."""
    balances: Dict[str, float] = {}

    for record in get_balance_records_for_group(group_id, db):
        balances[record.user_id] = balances.get(record.user_id, 0) + record.net_balance
        balances[record.other_user_id] = balances.get(record.other_user_id, 0) - record.net_balance

    return {user_id: round_money(balance) for user_id, balance in sorted(balances.items())}


def calculate_group_settlements(group_id: str, db: Session) -> List[Settlement]:
    """Collapse the group's pairwise debts into a short transfer plan."""
    balances = calculate_group_balances(group_id, db)
    participants = [
        ParticipantBalance(id=user_id, name=user_id, balance=balance)
        for user_id, balance in balances.items()
    ]
    return generate_settlements(participants)
