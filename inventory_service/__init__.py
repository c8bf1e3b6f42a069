"""Inventory Service - warehouse and inventory management API"""

__version__ = "1.0.0"
