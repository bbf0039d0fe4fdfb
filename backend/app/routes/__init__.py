# Routes package init
"""
Anjali Furniture Backend — API Routes Package
===============================================

Route Inventory:
    - products.py:           /api/products, /api/products/{id}
    - woods.py:              /api/woods, /api/woods/{id}
    - customer_requests.py:  /api/requests, /api/requests/{id}
    - site_config.py:        /api/config
    - health.py:             /health

Design Principle:
    Routes are THIN: guard (if any) → one store call → envelope.
    Failures are raised, never caught here; main.py's exception handlers
    produce the error envelope.
"""
