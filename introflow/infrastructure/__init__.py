"""Infrastructure Layer — database sessions, logging, and external service clients.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every external call maps its failures onto core/errors.py
"""
