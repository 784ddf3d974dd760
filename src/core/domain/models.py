"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-contained documentation (Field) without coupling
  the core to I/O libraries.
- Payloads from the PokéAPI are parsed once, at the edge, into these shapes.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SummaryReference(BaseModel):
    """Minimal listing entry returned by the first-stage fetch.

    Transient: discarded once the detail fetch for it completes.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(
        ...,
        description="Entity name as listed by the API.",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="Locator of the detail record for this entity.",
    )


class ListingPage(BaseModel):
    """Payload of `GET <base>/pokemon?limit=N`."""

    model_config = ConfigDict(extra="ignore")

    results: list[SummaryReference] = Field(
        ...,
        description="Summary references, in API order.",
    )


class Sprites(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    front_default: str | None = Field(
        default=None,
        description="URL of the default front sprite.",
    )


class DetailRecord(BaseModel):
    """Fully enriched entity record fetched per reference.

    Card fields are tolerant of absence here; the ingestion boundary
    (`adapters.record_validation`) reports missing fields as diagnostics
    instead of failing the load cycle.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | None = Field(
        default=None,
        description="PokéAPI numeric id; used as the card key.",
    )
    name: str | None = Field(
        default=None,
        description="Entity name.",
    )
    base_experience: int | None = Field(
        default=None,
        description="Numeric stat shown on the card as EXP.",
    )
    sprites: Sprites = Field(
        default_factory=Sprites,
        description="Sprite URLs; only `front_default` is used.",
    )

    @property
    def image_url(self) -> str | None:
        return self.sprites.front_default


class LoadStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class SessionState(BaseModel):
    """The display session's state: collection, loading flag and error.

    Written once per load cycle and replaced wholesale, never mutated.
    """

    model_config = ConfigDict(frozen=True)

    status: LoadStatus = Field(
        default=LoadStatus.LOADING,
        description="Current phase of the session.",
    )
    entities: tuple[DetailRecord, ...] = Field(
        default=(),
        description="Sorted entity collection; empty unless loaded.",
    )
    error: str | None = Field(
        default=None,
        description="Message of the failure that ended the cycle.",
    )

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @classmethod
    def pending(cls) -> "SessionState":
        return cls()

    @classmethod
    def loaded(cls, entities: list[DetailRecord] | tuple[DetailRecord, ...]) -> "SessionState":
        return cls(status=LoadStatus.LOADED, entities=tuple(entities))

    @classmethod
    def failed(cls, message: str) -> "SessionState":
        return cls(status=LoadStatus.ERROR, error=message)
