"""Core data models and schema validation for movie records."""

from .models import MovieRecord, MISSING_VALUE

__all__ = ["MovieRecord", "MISSING_VALUE"]
