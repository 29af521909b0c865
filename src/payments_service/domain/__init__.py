"""Domain layer - Core entities, value objects and rules.

This layer contains:
- Entities: Objects with identity and lifecycle (Payment)
- Value Objects: Immutable objects defined by their attributes (PaymentId)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
