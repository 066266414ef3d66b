"""Infrastructure adapters: Redis, bcrypt, PyJWT, structlog, user store."""
