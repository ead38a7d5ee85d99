"""
Top‑level package for the Employee API.

This file makes ``employee_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``employee_api.app.main``.  The HTTP client for talking to a running
service lives in ``employee_api.client``.
"""

__all__ = []
