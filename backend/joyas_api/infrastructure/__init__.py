"""Infrastructure — connection pool management and logging setup.

Invariants:
    - The only module family that talks to the database driver
"""
