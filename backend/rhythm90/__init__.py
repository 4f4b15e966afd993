"""
Rhythm90 Backend — Application Package Initializer
===================================================

What: Marks the `rhythm90` directory as a Python package.
Why:  Enables module imports like `from rhythm90.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin request router over a relational store:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← path + method → one handler
    ├─────────────────────────────────────┤
    │         Services (Resource Logic)   │  ← build statements, shape results
    ├─────────────────────────────────────┤
    │        Store (Data Access)          │  ← bind, execute, collect rows
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Each request gets its own session and store; nothing else is shared
    between requests except the engine's connection pool.
"""

__version__ = "1.0.0"
