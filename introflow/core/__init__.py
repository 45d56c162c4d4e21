"""Core Layer — pure domain logic: vocabularies, lifecycle rules, templates, stats.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure and deterministic ("now" is always a parameter)

Design Decisions:
    - Functional core separated from the imperative shell: services load rows,
      core decides, services write the returned patch
"""
