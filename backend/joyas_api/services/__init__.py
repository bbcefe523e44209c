"""Services — IO orchestration between routes and the connection pool."""
