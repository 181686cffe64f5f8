"""
Job Board Backend — Application Package
========================================

What: REST API for a job board (users, job postings, applications) backed by an
      embedded SQLite database file, with OpenAPI documentation.
Who:  Started through the `jobboard` console script (see __main__.py), which
      builds Settings from the environment and serves create_app(settings)
      with uvicorn.

Architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Lookups, rules, error mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy + aiosqlite
    └─────────────────────────────────────┘
"""

__version__ = "0.1.0"
