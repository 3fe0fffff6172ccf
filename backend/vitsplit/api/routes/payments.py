"""
Payment routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from vitsplit.db.session import get_db
from vitsplit.schemas.payment import PaymentCreate, PaymentStatusUpdate, PaymentResponse
from vitsplit.services import payment_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: PaymentCreate,
    db: Session = Depends(get_db)
):
    """Record a payment between two members."""
    try:
        return payment_service.create_payment(
            group_id=payment_data.group_id,
            from_user=payment_data.from_user,
            to_user=payment_data.to_user,
            amount=payment_data.amount,
            status=payment_data.status,
            currency=payment_data.currency,
            db=db
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get("/{group_id}", response_model=List[PaymentResponse])
async def list_payments(
    group_id: str,
    db: Session = Depends(get_db)
):
    """Get all payments for a group, newest first."""
    return payment_service.get_payments_by_group_id(group_id, db)


@router.get("/{group_id}/between/{user_id1}/{user_id2}", response_model=List[PaymentResponse])
async def list_payments_between(
    group_id: str,
    user_id1: str,
    user_id2: str,
    db: Session = Depends(get_db)
):
    """Get payments in either direction between two users."""
    return payment_service.get_payments_between_users(group_id, user_id1, user_id2, db)


@router.patch("/{payment_id}/status", response_model=PaymentResponse)
async def update_status(
    payment_id: int,
    status_data: PaymentStatusUpdate,
    db: Session = Depends(get_db)
):
    """Change a payment's status."""
    try:
        return payment_service.update_payment_status(payment_id, status_data.status, db)
    except LookupError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
