"""Domain exceptions for payment-gateways.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── InvalidCardRuleError
    │   └── InvalidTransactionReferenceError
    └── Registry Errors
        ├── UnknownGatewayError
        └── DuplicateGatewayError

An invalid card is NOT an error. Validators report it as False and the
payment service turns it into a rejected response.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidCardRuleError(DomainException):
    """Raised when a CardRule is built with a non-positive length or an empty prefix."""


class InvalidTransactionReferenceError(DomainException):
    """Raised when a transaction reference cannot be built.

    A reference needs a non-empty prefix and a token of exactly
    REFERENCE_TOKEN_LENGTH characters.
    """


# =============================================================================
# Registry Errors
# =============================================================================


class UnknownGatewayError(DomainException):
    """Raised when no factory is registered under the requested gateway key."""


class DuplicateGatewayError(DomainException):
    """Raised when a second factory is registered under an existing gateway key.

    Families are extended by adding a new key, never by replacing one.
    """
