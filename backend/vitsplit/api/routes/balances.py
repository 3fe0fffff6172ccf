"""
Group balance routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from vitsplit.db.session import get_db
from vitsplit.schemas.balance import (
    BalanceRecordResponse, BalanceBetweenUsersResponse,
    GroupBalancesResponse, GroupSettlementsResponse
)
from vitsplit.services import group_balance_service

router = APIRouter(prefix="/balances", tags=["balances"])


@router.get("/{group_id}", response_model=GroupBalancesResponse)
async def get_group_balances(
    group_id: str,
    db: Session = Depends(get_db)
):
    """Get each member's net position in a group."""
    balances = group_balance_service.calculate_group_balances(group_id, db)
    return GroupBalancesResponse(group_id=group_id, balances=balances)


@router.get("/{group_id}/records", response_model=List[BalanceRecordResponse])
async def get_group_records(
    group_id: str,
    db: Session = Depends(get_db)
):
    """Get all ledger records for a group."""
    return group_balance_service.get_balance_records_for_group(group_id, db)


@router.get("/{group_id}/settlements", response_model=GroupSettlementsResponse)
async def get_group_settlements(
    group_id: str,
    db: Session = Depends(get_db)
):
    """Get a simplified plan of who pays whom to settle the group."""
    settlements = group_balance_service.calculate_group_settlements(group_id, db)
    return GroupSettlementsResponse(group_id=group_id, settlements=settlements)


@router.get("/{group_id}/users/{user_id}", response_model=List[BalanceRecordResponse])
async def get_user_records(
    group_id: str,
    user_id: str,
    db: Session = Depends(get_db)
):
    """Get ledger records in a group involving one user."""
    return group_balance_service.get_balance_records_for_user_in_group(group_id, user_id, db)


@router.get("/{group_id}/between/{user_id1}/{user_id2}", response_model=BalanceBetweenUsersResponse)
async def get_balance_between(
    group_id: str,
    user_id1: str,
    user_id2: str,
    db: Session = Depends(get_db)
):
    """Get the balance between two users, from the first user's side."""
    balance = group_balance_service.get_balance_between_users(group_id, user_id1, user_id2, db)
    if not balance:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No balance between these users"
        )
    return balance
