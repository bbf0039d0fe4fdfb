"""
Anjali Furniture Backend — Application Package Initializer
============================================================

What: Marks the `app` directory as a Python package.
Who:  Used by uvicorn (`uvicorn app.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is a thin REST layer over the storefront database:

    ┌─────────────────────────────────────┐
    │     Middleware (transport stage)    │  ← rate limit, body limit, headers
    ├─────────────────────────────────────┤
    │       Routes (API Layer)            │  ← guard → store call → envelope
    ├─────────────────────────────────────┤
    │  Services (DataStore, Authorizer)   │  ← injected capabilities
    ├─────────────────────────────────────┤
    │  Models (tables) + Database engine  │  ← async SQLAlchemy
    └─────────────────────────────────────┘

    Handlers hold no state between requests. The store is the only shared
    resource, and it is injected so handlers can run against a fake.
"""

__version__ = "1.0.0"
