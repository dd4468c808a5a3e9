"""
Users API: reference CRUD service over a single "user" resource.

Application package root. Laid out as a small hexagonal
(ports & adapters) service.

Bounded contexts:
    - users: list, fetch, create and delete user records.

Layers:
    - domain: Entities, ports (ABCs), errors. No IO.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Database engine, migrations, SQL adapters.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, logging, rate limiting).
"""

__version__ = "0.1.0"
