from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def decode(key: str, raw: str | None, default: Any) -> Any:
    """Decode a stored value, substituting `default` for missing or corrupt data."""
    if raw is None:
        return default
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Stored value for %s is not valid JSON; using default", key)
        return default
    return default if parsed is None else parsed
