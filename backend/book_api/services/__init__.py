"""Services Layer — async orchestration of core rules around repository IO.

Invariants:
    - Services depend on repository Protocols, never on a concrete store

Design Decisions:
    - One service per resource for locality
"""
