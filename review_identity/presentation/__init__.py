"""HTTP presentation layer (FastAPI routers, RFC 7807 errors)."""
