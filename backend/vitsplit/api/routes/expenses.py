"""
Expense management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from vitsplit.db.session import get_db
from vitsplit.schemas.expense import ExpenseCreate, ExpenseResponse
from vitsplit.services.expense_service import create_expense, get_expenses_by_group_id

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def add_expense(
    expense_data: ExpenseCreate,
    db: Session = Depends(get_db)
):
    """Create an expense and update the group ledger."""
    try:
        return create_expense(
            group_id=expense_data.group_id,
            paid_by=expense_data.paid_by,
            amount=expense_data.amount,
            participant_ids=expense_data.participant_ids,
            description=expense_data.description,
            currency=expense_data.currency,
            db=db
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get("/{group_id}", response_model=List[ExpenseResponse])
async def list_expenses(
    group_id: str,
    db: Session = Depends(get_db)
):
    """Get all expenses for a group, newest first."""
    return get_expenses_by_group_id(group_id, db)
