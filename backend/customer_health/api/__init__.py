"""API Layer — FastAPI routes, request validation and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON envelopes

Design Decisions:
    - Thin routes delegate to services; validation happens before the service call
"""
