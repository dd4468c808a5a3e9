"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas
and dependency wiring. Routes call use cases and return responses.
"""
