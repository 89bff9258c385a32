"""Domain layer - Card rules, transaction references and domain errors.

This layer contains:
- Value Objects: Immutable objects defined by their attributes (e.g., CardRule)
- Domain Exceptions: Misconfiguration and lookup errors

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
