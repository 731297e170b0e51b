"""JSON export of domain models.

Why JSON:
- Interoperability with other tools and pipelines.
- A plain, diffable record of what the CLI computed, with no renderer in between.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel

from core.logging import get_logger

logger = get_logger(__name__)


def to_jsonable(payload: BaseModel | Sequence[BaseModel]) -> object:
    """Dump one model or a sequence of models to JSON-compatible data."""

    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    return [item.model_dump(mode="json") for item in payload]


def dumps(payload: BaseModel | Sequence[BaseModel]) -> str:
    """Serialize to UTF-8 JSON text with a stable layout."""

    return json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2, sort_keys=True)


def export_json(*, payload: BaseModel | Sequence[BaseModel], output_path: Path) -> Path:
    """Write `payload` as UTF-8 JSON, creating parent directories."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps(payload) + "\n", encoding="utf-8")
    logger.info("exported JSON to %s", output_path)
    return output_path
