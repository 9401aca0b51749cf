"""Domain value objects for Derecho en Perspectiva.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from derecho.domain.value.common import RootValueObject


class OrphanPolicy(str, Enum):
    """How replies whose parent is missing from a thread are handled."""

    DROP = "drop"
    PROMOTE = "promote"


class VerificationType(str, Enum):
    """Kind of one-time token sent by the auth service."""

    SIGNUP = "signup"
    RECOVERY = "recovery"
    EMAIL = "email"
    MAGICLINK = "magiclink"
    INVITE = "invite"
    EMAIL_CHANGE = "email_change"


class Email(RootValueObject[str]):
    """Normalised email address.

    Surrounding whitespace is stripped and the address lower-cased so the
    same mailbox always maps to the same rate limit key. Full validation
    (typos, placeholders) lives in EmailService.
    """

    @field_validator("root")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Trim and lower-case the address."""
        v = v.strip().lower()
        if not v or "@" not in v:
            raise ValueError("Email must contain '@'")
        if len(v) > 320:
            raise ValueError("Email must be at most 320 characters")
        return v

    @property
    def local_part(self) -> str:
        """Part before the '@'."""
        return self.root.split("@", 1)[0]

    @property
    def domain(self) -> str:
        """Part after the '@'."""
        return self.root.split("@", 1)[1]
