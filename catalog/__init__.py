"""
Catalog API - Application Package
=================================

GraphQL service for a product catalog.

    ┌─────────────────────────────────────┐
    │   GraphQL resolvers + auth gate     │  ← argument shaping, capability checks
    ├─────────────────────────────────────┤
    │   Services (validation, errors)     │  ← business rules, error taxonomy
    ├─────────────────────────────────────┤
    │   Repositories                      │  ← storage collaborator
    ├─────────────────────────────────────┤
    │   Models & Database                 │  ← SQLAlchemy ORM, async sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
