"""
Brands module - Brand catalog management.

This module handles:
- Brand entity and domain logic
- Brand repository (port)
- Brand infrastructure (Django ORM adapters)
- Brand commands, queries and handlers, including image attachment
"""
