# eshop/services/__init__.py
"""
Application services.

Layout per resource: repository.py (SQL), service.py (rules),
routes.py (FastAPI router), dependencies.py (wiring).

Applications:
- api: REST API for the marketplace
- relay: WebSocket chat relay
"""

__all__: list[str] = []
