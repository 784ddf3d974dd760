"""JSON export of the entity collection.

Why JSON:
- Interoperability with other tools and pipelines.
- Keeps a snapshot of a load cycle without the HTML rendering.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import LoadStatus, SessionState


def export_entities_json(*, state: SessionState, output_path: Path) -> Path:
    """Write the loaded collection as UTF-8 JSON with a stable layout."""

    if state.status is not LoadStatus.LOADED:
        raise ValueError(f"Nothing to export: session is {state.status.value}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [entity.model_dump(mode="json") for entity in state.entities]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
