"""Database Declarations — SQLAlchemy Base shared by the ORM models.

Invariants:
    - Metadata only; connections live in infrastructure/database.py
"""
