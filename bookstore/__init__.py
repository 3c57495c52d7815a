"""
Bookstore Service: books, customers and orders over a relational store
"""
__version__ = "1.0.0"
