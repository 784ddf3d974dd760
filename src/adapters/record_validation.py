"""Shape checks for detail payloads, at the ingestion edge.

A card needs a name, a numeric stat and an image URL. When the API omits one
of them the card still renders; this module only reports what is missing so
the problem shows up during development. It never raises.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, StrictInt, StrictStr, ValidationError
from pydantic.config import ConfigDict

logger = logging.getLogger(__name__)


class CardSprites(BaseModel):
    model_config = ConfigDict(extra="ignore")

    front_default: StrictStr


class CardShape(BaseModel):
    """What the card renderer expects from a detail record."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    base_experience: StrictInt
    sprites: CardSprites


def _location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def check_card_shape(payload: Any) -> list[str]:
    """Return one diagnostic per shape problem (empty when the shape is fine)."""

    try:
        CardShape.model_validate(payload)
    except ValidationError as exc:
        return [f"{_location(err['loc'])}: {err['msg']}" for err in exc.errors()]
    return []


def report_card_shape(payload: Any, *, source: str) -> list[str]:
    """Check `payload` and log each diagnostic as a warning."""

    diagnostics = check_card_shape(payload)
    for message in diagnostics:
        logger.warning("Invalid card data from %s: %s", source, message)
    return diagnostics
