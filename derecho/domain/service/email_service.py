"""Email validation domain service.

Catches common domain typos and placeholder addresses before an email is
handed to the auth service, so verification mails are not wasted on
addresses like ``someone@gmial.com``.
"""

import re
from typing import Optional

import logfire

from derecho.domain.value.common import ValueObject

from .base import Service

COMMON_DOMAIN_TYPOS: dict[str, str] = {
    "gmial.com": "gmail.com",
    "gmai.com": "gmail.com",
    "gmaill.com": "gmail.com",
    "gmail.con": "gmail.com",
    "gmail.cmo": "gmail.com",
    "yahooo.com": "yahoo.com",
    "yhoo.com": "yahoo.com",
    "yahoo.con": "yahoo.com",
    "hotmai.com": "hotmail.com",
    "hotmial.com": "hotmail.com",
    "hotmail.con": "hotmail.com",
    "outlok.com": "outlook.com",
    "outlook.con": "outlook.com",
    "icloud.con": "icloud.com",
    "protonmai.com": "protonmail.com",
}

PLACEHOLDER_ADDRESSES: frozenset[str] = frozenset(
    {
        "test@test.com",
        "example@example.com",
        "user@domain.com",
        "email@email.com",
    }
)

DISPOSABLE_DOMAIN_MARKERS: tuple[str, ...] = (
    "tempmail",
    "10minutemail",
    "throwaway",
    "guerrillamail",
    "mailinator",
)

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$", re.IGNORECASE)

MSG_REQUIRED = "El correo electrónico es requerido"
MSG_INVALID = "Por favor ingresa un correo electrónico válido"
MSG_PLACEHOLDER = "Por favor usa un correo electrónico válido y real"


class EmailValidationResult(ValueObject):
    """Outcome of validating an email address.

    ``corrected_email`` holds the normalised address when valid, or the
    suggested fix when the domain is a known typo.
    """

    is_valid: bool
    error: Optional[str] = None
    corrected_email: Optional[str] = None


def suggest_correction(email: str) -> Optional[str]:
    """Return the address with a known domain typo fixed, if any."""
    local, _, domain = email.strip().lower().partition("@")
    corrected_domain = COMMON_DOMAIN_TYPOS.get(domain)
    if not corrected_domain:
        return None
    return f"{local}@{corrected_domain}"


class EmailService(Service):
    """Domain service for email address checks."""

    def validate_email(self, email: str) -> EmailValidationResult:
        """Validate an email address.

        Checks run in order: presence, format, known domain typo,
        placeholder address. The first failing check determines the error.

        Args:
            email: Raw address as typed by the user

        Returns:
            Validation result with the normalised or suggested address
        """
        normalized = email.strip().lower()

        if not normalized:
            return EmailValidationResult(is_valid=False, error=MSG_REQUIRED)

        if not EMAIL_PATTERN.match(normalized):
            return EmailValidationResult(is_valid=False, error=MSG_INVALID)

        suggestion = suggest_correction(normalized)
        if suggestion:
            logfire.info(
                "Email domain typo detected",
                domain=normalized.partition("@")[2],
                suggestion=suggestion,
            )
            return EmailValidationResult(
                is_valid=False,
                error=f"¿Quisiste decir {suggestion}?",
                corrected_email=suggestion,
            )

        if normalized in PLACEHOLDER_ADDRESSES:
            return EmailValidationResult(is_valid=False, error=MSG_PLACEHOLDER)

        return EmailValidationResult(is_valid=True, corrected_email=normalized)

    def is_suspicious_email(self, email: str) -> bool:
        """Whether the address has no domain or uses a disposable mail service.

        Args:
            email: Address to check

        Returns:
            True if the address looks disposable or malformed
        """
        _, _, domain = email.strip().lower().partition("@")
        if not domain:
            return True
        return any(marker in domain for marker in DISPOSABLE_DOMAIN_MARKERS)
