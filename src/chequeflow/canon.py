"""
Canonical JSON Serialization

Deterministic JSON serialization for hashing holiday packs:
- Sorted keys (lexicographic)
- No whitespace
- UTF-8 encoding

The same table always produces the same hash, so a deployed service can
report exactly which holiday data it is rolling reminders over.

Input must already be plain JSON values; callers convert with their own
``to_dict()``.
"""
from __future__ import annotations

import hashlib
import json
from typing import Any


def canonical_json(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Raises TypeError for values JSON cannot represent.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def content_hash(obj: Any) -> str:
    """SHA-256 hex digest of the canonical JSON representation."""
    return hashlib.sha256(canonical_json(obj).encode("utf-8")).hexdigest()


def compute_holiday_pack_hash(pack: Any) -> str:
    """
    Content hash of a holiday pack's identity, weekend days and table.

    Display metadata (name, description) is not hashed.
    """
    return content_hash(pack.to_dict())
