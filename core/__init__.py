"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions, value objects and slug generation
- Database helpers
- Middleware components and metrics
"""
