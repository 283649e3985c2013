"""
DOMAIN LAYER - Offers, comments, users and favorites

This layer contains:
- Entities: Business objects with identity (Offer, Comment, User, Favorite)
- Value Objects: Immutable types (EntityId, Identity, enumerations)
- Ports: Interfaces that infrastructure implements (repositories, token
  verifier, schema validator, password hasher)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
