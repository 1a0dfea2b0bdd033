"""LUIS Client Package.

A small client for the LUIS natural-language-understanding query service.
It provides an application factory and typed results for the v1 and
v1 preview query APIs.
"""

from .application import Application, create
from .data_models import (
    Entity,
    Intent,
    QueryResult,
    QueryResultV1,
    QueryResultV1Preview,
)
from .errors import LuisError, LuisResponseError, UnsupportedVersionError

__version__ = "1.0.0"

__all__ = [
    "create",
    "Application",
    "Entity",
    "Intent",
    "QueryResult",
    "QueryResultV1",
    "QueryResultV1Preview",
    "LuisError",
    "LuisResponseError",
    "UnsupportedVersionError",
]
