"""Run summary validation and writing.

Uses a Python validation function (not jsonschema) to check required fields,
types, and per-probability array lengths before writing the JSON summary
that accompanies each ``_phi.tsv`` file.
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

import numpy as np

from intermediacy.config.experiment import RunConfig
from intermediacy.config.hashing import config_hash, estimate_config_hash
from intermediacy.graph.types import Graph
from intermediacy.reproducibility.version import get_code_version
from intermediacy.sampling.types import IntermediacyEstimate

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"
RESULT_SUFFIX = "_result.json"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "config",
    "graph",
    "estimates",
    "metadata",
}

REQUIRED_ESTIMATE_FIELDS = {"probability", "samples", "phi", "standard_error"}


def generate_run_id(config: RunConfig, graph_name: str) -> str:
    """Scannable run id: {graph}_s{source}_t{target}_z{samples}_{YYYYMMDD}_{HHMMSS}."""
    ts = datetime.now(timezone.utc)
    return (
        f"{graph_name}"
        f"_s{config.source}"
        f"_t{config.target}"
        f"_z{config.sampling.samples}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )


def validate_summary(summary: dict[str, Any]) -> list[str]:
    """Validate a summary dict. Returns error strings; empty means valid.

    Checks:
    - All required top-level fields are present
    - timestamp parses as ISO 8601
    - each estimate has probability, samples, phi and standard_error
    - phi and standard_error lengths match the reduced node count
    - phi values lie in [0, 1]
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(summary.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "timestamp" in summary:
        ts = summary["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    n_nodes = None
    graph_block = summary.get("graph")
    if isinstance(graph_block, dict):
        n_nodes = graph_block.get("reduced_nodes")
        if not isinstance(graph_block.get("labels"), list):
            errors.append("graph.labels must be a list")
    elif graph_block is not None:
        errors.append("graph must be a dict")

    estimates = summary.get("estimates", [])
    if not isinstance(estimates, list):
        errors.append("estimates must be a list")
        estimates = []
    for k, est in enumerate(estimates):
        if not isinstance(est, dict):
            errors.append(f"estimates[{k}] must be a dict")
            continue
        missing = REQUIRED_ESTIMATE_FIELDS - set(est.keys())
        if missing:
            errors.append(f"estimates[{k}] missing fields: {sorted(missing)}")
            continue
        p = est["probability"]
        if not isinstance(p, (int, float)) or not 0.0 <= p <= 1.0:
            errors.append(f"estimates[{k}].probability must lie in [0, 1]")
        for key in ("phi", "standard_error"):
            values = est[key]
            if not isinstance(values, list):
                errors.append(f"estimates[{k}].{key} must be a list")
            elif n_nodes is not None and len(values) != n_nodes:
                errors.append(
                    f"estimates[{k}].{key} length {len(values)} != "
                    f"reduced_nodes {n_nodes}"
                )
        if isinstance(est["phi"], list) and any(
            not 0.0 <= v <= 1.0 for v in est["phi"]
        ):
            errors.append(f"estimates[{k}].phi values must lie in [0, 1]")

    return errors


def build_summary(
    config: RunConfig,
    graph: Graph,
    reduced: Graph,
    estimates: Sequence[IntermediacyEstimate],
    seed_entropy: int,
) -> dict[str, Any]:
    """Assemble the summary dict for one run."""
    return {
        "schema_version": SCHEMA_VERSION,
        "run_id": generate_run_id(config, graph.name),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "graph": {
            "name": graph.name,
            "nodes": graph.n,
            "edges": graph.m,
            "reduced_nodes": reduced.n,
            "reduced_edges": reduced.m,
            "labels": list(reduced.labels),
        },
        "estimates": [
            {
                "probability": est.probability,
                "samples": est.samples,
                "phi": est.phi.tolist(),
                "standard_error": est.standard_error.tolist(),
            }
            for est in estimates
        ],
        "metadata": {
            "code_version": get_code_version(),
            "config_hash": config_hash(config),
            "estimate_hash": estimate_config_hash(config),
            # Python int: entropy can exceed 64 bits
            "seed_entropy": str(seed_entropy),
        },
    }


def write_summary(summary: dict[str, Any], path: str | Path) -> Path:
    """Validate and write a summary as JSON.

    Raises:
        ValueError: If validation fails.
    """
    errors = validate_summary(summary)
    if errors:
        raise ValueError(f"Summary validation failed: {errors}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(summary, f, indent=2, default=_json_default)
    log.info("Run summary written to %s", path)
    return path


def load_summary(path: str | Path) -> dict[str, Any]:
    with open(path) as f:
        return json.load(f)


def _json_default(obj: Any) -> Any:
    """Convert numpy scalars and arrays for json.dump."""
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
