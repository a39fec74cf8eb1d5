"""
Schema Validation Utilities

Validates movie records from the input catalogue against
movie.schema.json before they are turned into MovieRecords.

A record failing validation is skipped by the controller; it never
stops the rest of the batch.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_movie(data: Any) -> None:
    """
    Validate one movie record against the schema.

    Args:
        data: Decoded JSON value for a single record

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Movie record must be an object, got {type(data).__name__}",
        )

    if "title" not in data or data["title"] is None:
        raise ValidationError(
            "Missing required fields: ['title']",
            path="title",
            errors=["Missing field: title"],
        )

    schema = _load_schema("movie")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: ".".join(str(p) for p in e.absolute_path))
    if errors:
        first = errors[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )
