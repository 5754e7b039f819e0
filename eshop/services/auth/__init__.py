# eshop/services/auth/__init__.py
"""
Authentication: bcrypt password hashes, JWT session tokens, role gates.
"""
