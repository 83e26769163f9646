"""
Product Catalog Service package
"""

__version__ = "1.0.0"
