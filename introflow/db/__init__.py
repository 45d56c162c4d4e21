"""Database Package — the declarative Base shared by every ORM model.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests and local runs
"""
