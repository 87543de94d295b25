"""Core business logic layer.

Subpackages:
- shopping: ingredient text cleanup, categorization and shopping list consolidation
"""
__all__ = ["shopping"]
