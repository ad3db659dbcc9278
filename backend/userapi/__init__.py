"""
Users API Backend - Application Package Initializer
====================================================

What: Marks the `userapi` directory as a Python package.
Why:  Enables module imports like `from userapi.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend keeps the same layered shape regardless of its tiny size:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Lookups, create/delete rules
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic API contracts
    ├─────────────────────────────────────┤
    │         Store (In-Memory State)     │  ← Lock-guarded user list + id counter
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
