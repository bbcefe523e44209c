"""API Layer — FastAPI routes, request logging middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response body is {"error": "<fixed message>"}
"""
