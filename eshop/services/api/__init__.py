# eshop/services/api/__init__.py
"""
Marketplace REST API (FastAPI).
"""
