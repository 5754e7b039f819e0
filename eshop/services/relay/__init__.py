# eshop/services/relay/__init__.py
"""
Chat relay: in-memory presence directory and message forwarding over WebSockets.
"""
