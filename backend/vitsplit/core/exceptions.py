"""
Domain exceptions.
"""
from typing import List, Optional


class ParticipantValidationError(ValueError):
    """Raised by strict validation when a participant list is malformed."""

    def __init__(self, details: List[str], message: Optional[str] = None):
        self.details = details
        super().__init__(message or "Invalid participant list: " + "; ".join(details))
