"""
CookHub Backend — Application Package Initializer
===================================================

What: Marks the `cookhub` directory as a Python package.
Who:  Imported by uvicorn (`cookhub.main:app`), pytest, and the `cookhub` console script.

Architecture Note:
    The backend is split into the same layers for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← queries, capacity checks, filters
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Store (Persistence)          │  ← async SQLAlchemy over SQLite
    └─────────────────────────────────────┘

    Routes receive the Store through FastAPI dependency injection and hand it
    to a service; services never reach for a module-level connection.
"""

__version__ = "1.0.0"
