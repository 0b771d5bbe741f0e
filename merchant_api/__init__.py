"""
Merchant API backend.

Record management for suppliers, products, customers and system users.
"""

__version__ = "1.0.0"
