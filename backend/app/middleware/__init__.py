# Middleware package init
"""
Anjali Furniture Backend — Middleware Package
===============================================

What:  The transport stage applied uniformly before any route handler.

Middleware Chain (order matters!):
    Request → [CORS] → [Rate Limit] → [Body Limit] → [Request ID]
            → [Logging] → [Security Headers] → [GZip] → Route Handler

    1. CORS first: answers preflights itself and decorates every response,
       including the 429/413 envelopes produced further in
    2. Rate Limit: reject abusive callers before any work
    3. Body Limit: refuse oversized bodies before they are read
    4. Request ID: correlation ID for every later log line
    5. Logging: status and duration, tagged with the request ID
    6. Security Headers / GZip: response shaping
"""
