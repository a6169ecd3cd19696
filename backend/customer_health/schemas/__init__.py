"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, query strings, responses)
    - Domain enums from core/ used for sort fields and orders

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
