"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags; mutuals gets its two
      prefixes at registration, every other router carries its own
    - Routes never contain business logic (delegate to services/helpers)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
