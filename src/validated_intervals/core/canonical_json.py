"""
Canonical JSON Serialization

Deterministic JSON with sorted keys. Intervals serialise through their
canonical dictionary form.
"""

import json
from typing import Any

from ..interval import Interval


def _default(obj: Any) -> Any:
    if isinstance(obj, Interval):
        return obj.to_canonical()
    return str(obj)


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """
    Canonical JSON serialization with sorted keys.

    This ensures identical objects produce identical JSON strings.

    Args:
        obj: Object to serialize
        indent: Indentation level (None for compact)

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        default=_default,
        allow_nan=False,
    )
