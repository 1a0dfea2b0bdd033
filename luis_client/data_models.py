"""Data models for LUIS query results."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import LuisResponseError


def _require(data: Any, key: str, model: str) -> Any:
    """Fetch a required key from a response dictionary."""
    if not isinstance(data, dict):
        raise LuisResponseError(f"Expected a JSON object for {model}, got {type(data).__name__}")
    if key not in data:
        raise LuisResponseError(f"Missing '{key}' in {model} response")
    return data[key]


def _require_list(data: Any, key: str, model: str) -> list:
    value = _require(data, key, model)
    if not isinstance(value, list):
        raise LuisResponseError(f"Expected '{key}' to be a list in {model} response")
    return value


@dataclass
class Intent:
    """An intent identified in the query."""

    intent: str
    score: float

    @classmethod
    def from_dict(cls, data: dict) -> "Intent":
        return cls(
            intent=_require(data, "intent", "intent"),
            score=_require(data, "score", "intent"),
        )

    def to_dict(self) -> dict:
        return {"intent": self.intent, "score": self.score}


@dataclass
class Entity:
    """An entity identified in the query.

    Offsets are zero-based character positions into the query, as returned
    by the service.
    """

    entity: str
    type: str
    start_index: int
    end_index: int
    score: float

    @classmethod
    def from_dict(cls, data: dict) -> "Entity":
        return cls(
            entity=_require(data, "entity", "entity"),
            type=_require(data, "type", "entity"),
            start_index=_require(data, "startIndex", "entity"),
            end_index=_require(data, "endIndex", "entity"),
            score=_require(data, "score", "entity"),
        )

    def to_dict(self) -> dict:
        return {
            "entity": self.entity,
            "type": self.type,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
            "score": self.score,
        }


@dataclass
class QueryResult:
    """Attributes shared by the results of every API version."""

    query: str
    entities: list[Entity] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "entities": [entity.to_dict() for entity in self.entities],
        }


@dataclass
class QueryResultV1(QueryResult):
    """Result of a query against the v1 API, with all intents ranked."""

    intents: list[Intent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "QueryResultV1":
        """Build a result from the parsed response body."""
        return cls(
            query=_require(data, "query", "v1"),
            entities=[Entity.from_dict(item) for item in _require_list(data, "entities", "v1")],
            intents=[Intent.from_dict(item) for item in _require_list(data, "intents", "v1")],
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["intents"] = [intent.to_dict() for intent in self.intents]
        return result


@dataclass
class QueryResultV1Preview(QueryResult):
    """Result of a query against the v1 preview API.

    The preview API returns only the top-scoring intent rather than the
    ranked list.
    """

    top_scoring_intent: Optional[Intent] = None

    @classmethod
    def from_dict(cls, data: dict) -> "QueryResultV1Preview":
        """Build a result from the parsed response body."""
        return cls(
            query=_require(data, "query", "v1 preview"),
            entities=[Entity.from_dict(item) for item in _require_list(data, "entities", "v1 preview")],
            top_scoring_intent=Intent.from_dict(_require(data, "topScoringIntent", "v1 preview")),
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.top_scoring_intent is not None:
            result["topScoringIntent"] = self.top_scoring_intent.to_dict()
        return result
