# src/models/lookup.py
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class NameFound(BaseModel):
    """The store has a non-empty name for the team."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["found"] = "found"
    name: str


class NameNotFound(BaseModel):
    """The store answered, but has no row or an empty name for the team."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"


class LookupFailed(BaseModel):
    """The query itself failed (network, API error, bad payload, no client)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failed"] = "failed"
    reason: str


LookupResult = Union[NameFound, NameNotFound, LookupFailed]
