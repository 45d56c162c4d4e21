"""Services Layer — per-request use cases over the entity store.

Invariants:
    - Services receive a Store (one AsyncSession) and never open sessions
    - Ownership is enforced here, so every route gets the same 404/403 order

Design Decisions:
    - One service per resource group (auth, jobs, outreach, discovery, stats)
"""
