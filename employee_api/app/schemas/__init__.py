"""
Pydantic schema definitions for API payloads.

Schemas double as the in‑memory representation of an employee that
is passed between the repository, service and API layers.
"""
