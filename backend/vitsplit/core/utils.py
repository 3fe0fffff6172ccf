"""
Utility functions for the application.
"""
from typing import Any, Dict
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

CENT = Decimal("0.01")
HALF_CENT = 0.005


def round_money(value: float) -> float:
    """Round a monetary amount to 2 decimal places, halves away from zero."""
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        # Large enough for any finite float plus two decimals
        ctx.prec = 400
        return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def is_settled(value: float, tolerance: float = 0.01) -> bool:
    """
    Whether a remaining balance is close enough to zero to drop.

    Anything within half a cent counts regardless of tolerance, since it
    would round to a zero transfer.
    """
    return abs(value) < tolerance or abs(value) <= HALF_CENT


def format_money(amount: float, symbol: str = "") -> str:
    """Render an amount with a currency symbol and 2 decimals."""
    return f"{symbol}{amount:.2f}"


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
