"""
Payment service for recording money moved between group members.
"""
import logging
from typing import List, Optional
from sqlalchemy import or_, and_
from sqlalchemy.orm import Session
from vitsplit.core.config import settings
from vitsplit.models.payment import Payment, PaymentStatus
from vitsplit.services.group_balance_service import update_balances_for_payment

logger = logging.getLogger(__name__)


def create_payment(
    group_id: str,
    from_user: str,
    to_user: str,
    amount: float,
    status: PaymentStatus = PaymentStatus.PENDING,
    currency: Optional[str] = None,
    db: Session = None
) -> Payment:
    """Create a payment; completed payments are posted to the ledger immediately."""
    if not group_id or not from_user or not to_user:
        raise ValueError("group_id, from_user and to_user are required")
    if from_user == to_user:
        raise ValueError("A user cannot pay themselves")
    if amount is None or amount <= 0:
        raise ValueError("Payment amount must be positive")

    payment = Payment(
        group_id=group_id,
        from_user=from_user,
        to_user=to_user,
        amount=amount,
        currency=(currency or settings.DEFAULT_CURRENCY).upper(),
        status=status
    )
    db.add(payment)

    try:
        if status == PaymentStatus.COMPLETED:
            update_balances_for_payment(group_id, from_user, to_user, amount, db)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(payment)
    logger.info(f"Created {status.value} payment {payment.id}: {from_user} -> {to_user} {amount:.2f}")
    return payment


def get_payments_by_group_id(group_id: str, db: Session) -> List[Payment]:
    """Get all payments for a group, newest first."""
    return db.query(Payment).filter(
        Payment.group_id == group_id
    ).order_by(Payment.created_at.desc(), Payment.id.desc()).all()


def get_payments_between_users(group_id: str, user_id1: str, user_id2: str, db: Session) -> List[Payment]:
    """Get payments in either direction between two users of a group."""
    return db.query(Payment).filter(
        Payment.group_id == group_id,
        or_(
            and_(Payment.from_user == user_id1, Payment.to_user == user_id2),
            and_(Payment.from_user == user_id2, Payment.to_user == user_id1)
        )
    ).order_by(Payment.created_at.desc(), Payment.id.desc()).all()


def update_payment_status(payment_id: int, status: PaymentStatus, db: Session) -> Payment:
    """Change a payment's status, posting it to the ledger when it completes."""
    payment = db.query(Payment).filter(Payment.id == payment_id).first()
    if not payment:
        raise LookupError("Payment not found")

    if payment.status == status:
        return payment
    if payment.status == PaymentStatus.COMPLETED:
        raise ValueError("A completed payment cannot change status")

    try:
        if status == PaymentStatus.COMPLETED:
            update_balances_for_payment(payment.group_id, payment.from_user, payment.to_user, payment.amount, db)
        payment.status = status
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(payment)
    logger.info(f"Payment {payment.id} is now {status.value}")
    return payment
