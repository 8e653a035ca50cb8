"""Infrastructure Layer — database access, persistence adapters, and cross-cutting concerns.

Invariants:
    - Infrastructure never contains business rules (those live in core/ and services/)
    - All database errors mapped to DatabaseError before reaching the API layer

Design Decisions:
    - Repository implementations live here, their Protocols live in core/
"""
