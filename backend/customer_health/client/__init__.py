"""Browser API Client — typed httpx wrapper used by the UI to reach the JSON API.

Invariants:
    - Callers only ever see ApiClientError, never raw httpx exceptions
"""
