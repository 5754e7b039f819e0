"""
eshop: marketplace backend and chat relay.
"""

__version__ = "1.0.0"
