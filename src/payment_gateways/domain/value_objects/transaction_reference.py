from __future__ import annotations

from dataclasses import dataclass

from payment_gateways.domain.exceptions import InvalidTransactionReferenceError

REFERENCE_TOKEN_LENGTH = 8
SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class TransactionReference:
    """Value object for the reference returned by a processor.

    Rendered as "<prefix>-<token>", e.g. "STRIPE-1a2b3c4d". The token is
    a truncated identifier, so two references CAN collide; nothing here
    tries to prevent that.
    """

    prefix: str
    token: str

    def __post_init__(self) -> None:
        if not self.prefix:
            raise InvalidTransactionReferenceError("Reference prefix cannot be empty")

        if len(self.token) != REFERENCE_TOKEN_LENGTH:
            raise InvalidTransactionReferenceError(
                f"Reference token must have {REFERENCE_TOKEN_LENGTH} characters, "
                f"got {len(self.token)}"
            )

    @classmethod
    def from_identifier(cls, prefix: str, identifier: str) -> TransactionReference:
        """Build a reference from the first characters of a fresh identifier.

        Args:
            prefix: Gateway tag, without the separator (e.g. "MP").
            identifier: Any identifier text, typically str(uuid4()).

        Raises:
            InvalidTransactionReferenceError: If the identifier is too short
                or the prefix is empty.
        """
        if len(identifier) < REFERENCE_TOKEN_LENGTH:
            raise InvalidTransactionReferenceError(
                f"Identifier must have at least {REFERENCE_TOKEN_LENGTH} characters: {identifier!r}"
            )
        return cls(prefix=prefix, token=identifier[:REFERENCE_TOKEN_LENGTH])

    def __str__(self) -> str:
        return f"{self.prefix}{SEPARATOR}{self.token}"
