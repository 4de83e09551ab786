"""Outcome of an authorization check."""

from dataclasses import dataclass

from src.domain.enums import DenialReason


@dataclass(frozen=True, slots=True)
class AuthorizationDecision:
    """Allow/deny outcome, created fresh per request.

    Attributes:
        allowed: Whether the request may proceed.
        reason: Why it was denied; None when allowed.
    """

    allowed: bool
    reason: DenialReason | None = None

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        """Positive decision."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenialReason) -> "AuthorizationDecision":
        """Negative decision with a reason."""
        return cls(allowed=False, reason=reason)
