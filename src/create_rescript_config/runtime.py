"""Node.js runtime check.

The generated project is built with node tooling, so the installed
node must meet a minimum major version before anything is written.
"""

import re
import subprocess
from typing import Tuple

from create_rescript_config.errors import NodeNotFoundError, NodeVersionError

# Timeout for `node --version` (seconds)
NODE_TIMEOUT = 10

_VERSION_PART = re.compile(r"\d+")


def parse_version(version: str) -> Tuple[int, ...]:
    """Parse "v12.3.1" / "12.3" into a comparable tuple."""
    parts = []
    for piece in version.strip().lstrip("vV").split("."):
        match = _VERSION_PART.match(piece)
        if not match:
            break
        parts.append(int(match.group()))
    return tuple(parts)


def compare_versions(left: str, right: str) -> int:
    """Compare dotted versions numerically; missing parts count as 0."""
    a, b = parse_version(left), parse_version(right)
    width = max(len(a), len(b))
    a += (0,) * (width - len(a))
    b += (0,) * (width - len(b))
    return (a > b) - (a < b)


def get_node_version() -> str:
    """Return the output of `node --version`.

    Raises:
        NodeNotFoundError: If node is not installed or does not answer
    """
    try:
        result = subprocess.run(
            ["node", "--version"],
            capture_output=True,
            text=True,
            timeout=NODE_TIMEOUT,
        )
    except FileNotFoundError:
        raise NodeNotFoundError("node was not found in PATH")
    except subprocess.TimeoutExpired:
        raise NodeNotFoundError(f"node --version timed out after {NODE_TIMEOUT}s")

    if result.returncode != 0:
        raise NodeNotFoundError(f"node --version failed: {result.stderr.strip()}")
    return result.stdout.strip()


def check_node_version(minimum: str) -> str:
    """Ensure the installed node is at least `minimum`.

    Returns:
        The detected version string

    Raises:
        NodeNotFoundError: If node is missing
        NodeVersionError: If node is older than `minimum`
    """
    found = get_node_version()
    if compare_versions(found, minimum) < 0:
        raise NodeVersionError(
            f"This utility is only compatible with versions of node v{minimum} and above",
            found=found,
            minimum=minimum,
        )
    return found
