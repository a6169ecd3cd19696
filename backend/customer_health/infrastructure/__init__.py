"""Infrastructure Layer — database access, repositories and logging setup.

Invariants:
    - Only this layer imports SQLAlchemy engine/session machinery
    - Store failures leave this layer as DatabaseError, never as driver exceptions
"""
