"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - JSON keys are camelCase; snake_case is accepted on input
    - Domain enums from core/ used for status/outcome fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
