"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database through the default settings
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
