"""
Tests for payments and their effect on the ledger.
"""
import pytest
from vitsplit.models.payment import PaymentStatus
from vitsplit.services import group_balance_service, payment_service
from vitsplit.services.expense_service import create_expense


@pytest.fixture
def bob_owes_alice(db):
    create_expense("g1", "alice", 200, ["alice", "bob"], db=db)
    return db


def test_completed_payment_reduces_debt(bob_owes_alice):
    db = bob_owes_alice
    payment_service.create_payment("g1", "bob", "alice", 60, status=PaymentStatus.COMPLETED, db=db)

    between = group_balance_service.get_balance_between_users("g1", "alice", "bob", db)
    assert between.user1_balance == 40
    assert group_balance_service.calculate_group_balances("g1", db) == {"alice": 40, "bob": -40}


def test_pending_payment_leaves_ledger_alone(bob_owes_alice):
    db = bob_owes_alice
    payment = payment_service.create_payment("g1", "bob", "alice", 100, db=db)

    assert payment.status == PaymentStatus.PENDING
    assert payment.currency == "INR"
    between = group_balance_service.get_balance_between_users("g1", "alice", "bob", db)
    assert between.user1_balance == 100


def test_completing_a_payment_posts_once(bob_owes_alice):
    db = bob_owes_alice
    payment = payment_service.create_payment("g1", "bob", "alice", 100, db=db)

    payment_service.update_payment_status(payment.id, PaymentStatus.COMPLETED, db)
    payment_service.update_payment_status(payment.id, PaymentStatus.COMPLETED, db)

    assert group_balance_service.calculate_group_balances("g1", db) == {"alice": 0, "bob": 0}
    assert group_balance_service.calculate_group_settlements("g1", db) == []

    with pytest.raises(ValueError):
        payment_service.update_payment_status(payment.id, PaymentStatus.CANCELLED, db)


def test_cancelled_payment_never_posts(bob_owes_alice):
    db = bob_owes_alice
    payment = payment_service.create_payment("g1", "bob", "alice", 100, db=db)

    cancelled = payment_service.update_payment_status(payment.id, PaymentStatus.CANCELLED, db)

    assert cancelled.status == PaymentStatus.CANCELLED
    assert group_balance_service.calculate_group_balances("g1", db) == {"alice": 100, "bob": -100}


def test_unknown_payment(db):
    with pytest.raises(LookupError):
        payment_service.update_payment_status(999, PaymentStatus.COMPLETED, db)


def test_payment_validation(db):
    with pytest.raises(ValueError):
        payment_service.create_payment("g1", "bob", "bob", 10, db=db)
    with pytest.raises(ValueError):
        payment_service.create_payment("g1", "bob", "alice", -5, db=db)


def test_payments_between_users_in_both_directions(db):
    first = payment_service.create_payment("g1", "bob", "alice", 10, db=db)
    second = payment_service.create_payment("g1", "alice", "bob", 5, db=db)
    payment_service.create_payment("g1", "carol", "alice", 7, db=db)
    payment_service.create_payment("g2", "bob", "alice", 3, db=db)

    between = payment_service.get_payments_between_users("g1", "alice", "bob", db)
    assert [p.id for p in between] == [second.id, first.id]
    assert len(payment_service.get_payments_by_group_id("g1", db)) == 3
