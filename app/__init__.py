"""
Roster API - Application Package
=================================

Layered like this:

    ┌─────────────────────────────────────┐
    │     Routes + Response Mapper        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services + Validators             │  ← validate → execute → classify
    ├─────────────────────────────────────┤
    │   Query Executor                    │  ← one statement, outcome value
    ├─────────────────────────────────────┤
    │   Connection Pool (database.py)     │  ← bounded async SQLAlchemy engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
