"""Verified bearer credential claims."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class CredentialClaims:
    """Claims extracted from a credential whose signature and expiry passed.

    Attributes:
        subject_id: User id from the "sub" claim (already parsed to int).
        expires_at: Expiry instant (UTC).
    """

    subject_id: int
    expires_at: datetime
