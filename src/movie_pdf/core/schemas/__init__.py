"""
Schemas Package

JSON schema definition and validation for movie records.
"""

from .validator import validate_movie, ValidationError

__all__ = [
    "validate_movie",
    "ValidationError",
]
