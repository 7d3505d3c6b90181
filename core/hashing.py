"""
Hashing Module - SHA256 Result Fingerprints

Provides canonical JSON serialization and SHA256 hashing of simulation
results. Two runs over the same input (and the same as-of date) must
produce the same fingerprint, which is how callers detect drift between
stored reports and a fresh recomputation.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import hashlib
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def canonical_json_dumps(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Ensures deterministic serialization for hashing:
    - Keys sorted alphabetically
    - No whitespace
    - Decimals kept as exact strings (never floats)
    - Dates in ISO format

    Args:
        obj: Object to serialize (dict, list, or primitive)

    Returns:
        Canonical JSON string

    Example:
        >>> canonical_json_dumps({"total": Decimal("49100.00"), "as_of": date(2026, 1, 15)})
        '{"as_of":"2026-01-15","total":"49100.00"}'
    """
    def default_handler(o):
        if isinstance(o, Decimal):
            return str(o)
        elif isinstance(o, Enum):
            return o.value
        elif isinstance(o, (date, datetime)):
            return o.isoformat()
        elif hasattr(o, "to_dict"):
            return o.to_dict()
        else:
            raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':'),
        default=default_handler,
        ensure_ascii=True
    )


def calculate_sha256(data: Any) -> str:
    """
    Calculate SHA256 hash of data.

    Args:
        data: Data to hash (will be serialized to canonical JSON)

    Returns:
        SHA256 hex digest prefixed with 'sha256:'
    """
    json_str = canonical_json_dumps(data)
    hash_obj = hashlib.sha256(json_str.encode('utf-8'))
    return f"sha256:{hash_obj.hexdigest()}"


def verify_hash(data: Any, expected_hash: str) -> bool:
    """
    Verify that data matches expected hash.

    Args:
        data: Data to verify
        expected_hash: Expected hash (with 'sha256:' prefix)

    Returns:
        True if hash matches, False otherwise
    """
    return calculate_sha256(data) == expected_hash
