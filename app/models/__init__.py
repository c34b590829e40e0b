"""
Database models package.
"""

from app.models.interest import Interest

__all__ = ["Interest"]
