"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes the
domain‑specific endpoint routers; ``deps.py`` holds the FastAPI
dependencies that wire a service to its repository.
"""
