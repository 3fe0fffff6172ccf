"""
Settlement engine: equal-split balances and greedy debt netting.

The functions here are pure. They never touch the database and never mutate
their input; callers persist whatever they need from the returned models.
"""
import logging
from typing import List, Optional, Sequence
from vitsplit.core.config import settings
from vitsplit.core.exceptions import ParticipantValidationError
from vitsplit.core.utils import round_money, is_settled, format_money
from vitsplit.schemas.settlement import (
    Participant, ParticipantBalance, Settlement, BalanceSummary, ExpenseSplitResult
)

logger = logging.getLogger(__name__)


class OpenBalance:
    """A creditor or debtor still waiting to be matched."""
    def __init__(self, participant: ParticipantBalance):
        self.id = participant.id
        self.name = participant.name
        self.remaining_balance = participant.balance


def _with_balance(p: Participant, share: float, balance: float) -> ParticipantBalance:
    return ParticipantBalance(
        id=p.id,
        name=p.name,
        amount_paid=p.amount_paid,
        is_participating=p.is_participating,
        share=share,
        balance=balance
    )


def compute_balances(participants: Sequence[Participant]) -> BalanceSummary:
    """
    Split the participating members' total equally among them.

    Non-participants owe nothing and keep whatever they paid as a positive
    balance. Output preserves input order.
    """
    if not participants:
        return BalanceSummary()

    participating = [p for p in participants if p.is_participating]

    if not participating:
        return BalanceSummary(
            participants=[
                _with_balance(p, share=0, balance=p.amount_paid)
                for p in participants
            ]
        )

    total_expense = sum(p.amount_paid for p in participating)
    participant_count = len(participating)
    individual_share = total_expense / participant_count

    with_balance = []
    for p in participants:
        share = individual_share if p.is_participating else 0
        with_balance.append(_with_balance(p, share=share, balance=p.amount_paid - share))

    logger.debug(
        f"Split {total_expense} among {participant_count} participants: {individual_share} each"
    )

    return BalanceSummary(
        total_expense=total_expense,
        individual_share=individual_share,
        participant_count=participant_count,
        participants=with_balance
    )


def generate_settlements(
    participants: Sequence[ParticipantBalance],
    currency_symbol: Optional[str] = None,
    tolerance: Optional[float] = None
) -> List[Settlement]:
    """
    Reduce balances to a short list of transfers.

    Repeatedly matches the largest remaining creditor with the largest
    remaining debtor. Lists are sorted once up front; settled parties are
    dropped from the head only.
    """
    if len(participants) < 2:
        return []

    symbol = settings.CURRENCY_SYMBOL if currency_symbol is None else currency_symbol
    tolerance = settings.SETTLEMENT_TOLERANCE if tolerance is None else tolerance

    creditors = [OpenBalance(p) for p in participants if p.balance > 0]
    debtors = [OpenBalance(p) for p in participants if p.balance < 0]

    creditors.sort(key=lambda x: x.remaining_balance, reverse=True)
    debtors.sort(key=lambda x: x.remaining_balance)

    settlements = []

    while creditors and debtors:
        creditor = creditors[0]
        debtor = debtors[0]

        amount = round_money(min(creditor.remaining_balance, abs(debtor.remaining_balance)))

        if amount > 0:
            settlements.append(Settlement(
                from_id=debtor.id,
                to_id=creditor.id,
                amount=amount,
                description=f"{debtor.name} pays {format_money(amount, symbol)} to {creditor.name}"
            ))
            creditor.remaining_balance -= amount
            debtor.remaining_balance += amount

        if is_settled(creditor.remaining_balance, tolerance):
            creditors.pop(0)
        if is_settled(debtor.remaining_balance, tolerance):
            debtors.pop(0)

    leftover = creditors or debtors
    if leftover:
        residue = sum(abs(p.remaining_balance) for p in leftover)
        logger.warning(
            f"{len(leftover)} balance(s) left unsettled (total {residue:.2f}): "
            f"{[p.id for p in leftover]}"
        )

    return settlements


def calculate_expense_split(participants: Sequence[Participant]) -> ExpenseSplitResult:
    """Compute balances and the settlement plan for one expense."""
    summary = compute_balances(participants)
    settlements = generate_settlements(summary.participants)

    return ExpenseSplitResult(
        **summary.model_dump(exclude={"participants"}),
        participants=summary.participants,
        settlements=settlements
    )


def validate_participants(participants: Sequence[Participant]) -> None:
    """
    Reject participant lists the engine would silently compute garbage for.

    Empty lists, all-zero amounts and nobody participating are valid.
    """
    problems = []
    seen = set()

    for index, p in enumerate(participants):
        if not p.id or not p.id.strip():
            problems.append(f"participant {index} has an empty id")
        elif p.id in seen:
            problems.append(f"duplicate participant id '{p.id}'")
        else:
            seen.add(p.id)

        if p.amount_paid < 0:
            problems.append(f"participant '{p.id}' has a negative amount_paid ({p.amount_paid})")

    if problems:
        raise ParticipantValidationError(problems)
