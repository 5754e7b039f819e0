# eshop/shared/__init__.py
"""
Code shared by the API and the relay.

Modules:
- models: DTOs and request models (pydantic)
"""

__all__: list[str] = []
