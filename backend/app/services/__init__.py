# Services package init
"""
Anjali Furniture Backend — Services Layer
===========================================

What:  Capabilities injected into route handlers.

Service Inventory:
    - DataStore (abstract): gateway over products, woods, customer requests, config
    - SQLAlchemyStore: DataStore backed by async SQLAlchemy
    - Authorizer (abstract): admin credential check
    - SharedSecretAuthorizer: compares the bearer header with ADMIN_TOKEN

Routes receive these through FastAPI dependencies (app/dependencies.py),
so tests replace them with fakes via `app.dependency_overrides`.
"""
