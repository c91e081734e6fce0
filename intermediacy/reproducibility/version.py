"""Code provenance for run summaries."""

import subprocess
from importlib import metadata
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[2]


def get_code_version() -> str:
    """Describe the code that produced a result.

    Returns:
        One of:
        - ``git describe --always --dirty`` output for a source checkout,
          e.g. "3f2a9c1" or "v0.1.0-4-g3f2a9c1-dirty"
        - the installed distribution version, e.g. "0.1.0"
        - "unknown"
    """
    try:
        return subprocess.check_output(
            ["git", "describe", "--always", "--dirty"],
            cwd=_REPO_ROOT,
            stderr=subprocess.DEVNULL,
        ).decode().strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        pass

    try:
        return metadata.version("intermediacy")
    except metadata.PackageNotFoundError:
        return "unknown"
