"""ORM Models — table declarations for the inventory store."""
