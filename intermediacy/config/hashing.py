"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from intermediacy.config.experiment import RunConfig


def config_hash(config: Any) -> str:
    """First 16 hex characters of the SHA-256 of a dataclass as sorted JSON."""
    serialized = json.dumps(
        asdict(config),
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def estimate_config_hash(config: RunConfig) -> str:
    """Hash of everything that determines the estimates.

    Ignores description, tags, output location and plotting, so two runs
    that would produce identical phi values share the hash.
    """
    d = asdict(config)
    for key in ("description", "tags", "output_dir", "plot"):
        d.pop(key, None)
    serialized = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]
