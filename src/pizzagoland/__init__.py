"""
PizzaGoland API - user CRUD over MongoDB plus a JSON message endpoint
"""

__version__ = "1.0.0"
