"""Service Layer — translates validated input into repository calls.

Invariants:
    - Services hold no state between calls
    - Store failures leave this layer as DatabaseError; missing ids as NotFoundError
"""
