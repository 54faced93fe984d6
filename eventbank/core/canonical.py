"""
Canonical serialization for fingerprints and hash chains.

Events and states are hashed from these bytes, so the output must not depend
on dict insertion order, whitespace or platform.
"""

import dataclasses
import hashlib
import json
from enum import Enum
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested values to a canonical JSON-ready form.

    Rules:
    - dataclass instances become dicts of their fields
    - enums collapse to their value
    - dict keys sorted alphabetically
    - tuples converted to lists
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return canonicalize(obj.value)
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """UTF-8 JSON with sorted keys and no insignificant whitespace."""
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    return canonical_json_bytes(obj).decode("utf-8")


def canonical_hash(obj: Any) -> str:
    """SHA-256 hex digest of the canonical bytes of obj."""
    return hashlib.sha256(canonical_json_bytes(obj)).hexdigest()
