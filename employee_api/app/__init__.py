"""
Application package initializer.

This package contains the main entrypoint for the API and its
layers: ``schemas`` (pydantic payloads), ``repositories`` (data
access), ``services`` (business rules) and ``api`` (HTTP routes).
Requests flow from the routers to the service, from the service to
the repository and from the repository to the SQLite store.
"""

from .main import app  # noqa: F401
