"""
Attribute schemas for the access-token and access-grant records.

The validator only needs to know whether a record type exposes a given
attribute. Anything with a ``has_attribute`` method will do; ``ModelSchema``
is a plain implementation backed by a set of names.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Protocol, runtime_checkable


@runtime_checkable
class AttributeModel(Protocol):
    """A record type that can report which attributes it has."""

    def has_attribute(self, name: str) -> bool:
        ...


@dataclass(frozen=True)
class ModelSchema:
    """Named, immutable set of attribute names."""
    name: str
    attributes: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "attributes", frozenset(self.attributes))

    def has_attribute(self, name: str) -> bool:
        return str(name) in self.attributes

    def __str__(self) -> str:
        return self.name


def model_schema(name: str, attributes: Iterable[str]) -> ModelSchema:
    return ModelSchema(name, frozenset(attributes))


ACCESS_TOKEN_SCHEMA = model_schema("AccessToken", [
    "id",
    "resource_owner_id",
    "application_id",
    "token",
    "refresh_token",
    "previous_refresh_token",
    "expires_in",
    "scopes",
    "created_at",
    "revoked_at",
])

ACCESS_GRANT_SCHEMA = model_schema("AccessGrant", [
    "id",
    "resource_owner_id",
    "application_id",
    "token",
    "expires_in",
    "redirect_uri",
    "scopes",
    "created_at",
    "revoked_at",
    "code_challenge",
    "code_challenge_method",
])
