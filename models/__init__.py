"""
Data Models

Defines the core data structure:
- Line
"""

from .line import Line

__all__ = ["Line"]
