"""
Settlement calculation routes.
"""
from fastapi import APIRouter
from typing import List
from vitsplit.schemas.settlement import (
    SplitRequest, ReduceRequest, ExpenseSplitResult, BalanceSummary, Settlement
)
from vitsplit.services.settlement_service import (
    calculate_expense_split, compute_balances, generate_settlements, validate_participants
)

router = APIRouter(prefix="/settlements", tags=["settlements"])


@router.post("/split", response_model=ExpenseSplitResult)
async def split_expense(request: SplitRequest):
    """Compute balances and the settlement plan for one expense."""
    if request.strict:
        validate_participants(request.participants)

    return calculate_expense_split(request.participants)


@router.post("/balances", response_model=BalanceSummary)
async def get_balances(request: SplitRequest):
    """Compute each participant's share and balance without settling."""
    if request.strict:
        validate_participants(request.participants)

    return compute_balances(request.participants)


@router.post("/reduce", response_model=List[Settlement])
async def reduce_balances(request: ReduceRequest):
    """Reduce already computed balances to a list of transfers."""
    return generate_settlements(request.participants)
