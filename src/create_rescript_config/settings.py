"""Run settings and fixed file/package names.

Settings are built once by the CLI and passed explicitly to every stage
(loader, prompts, synthesizer, writer, presenter).
"""

from dataclasses import dataclass, field
from pathlib import Path

from create_rescript_config import __version__

TOOL_NAME = "Create ReScript config"

# Files probed or written in the workspace
PACKAGE_JSON = "package.json"
BS_CONFIG = "bsconfig.json"
YARN_LOCK = "yarn.lock"

# Packages
RESCRIPT_PACKAGE = "bs-platform"
REACT_PACKAGE = "react"
REACT_DOM_PACKAGE = "react-dom"
RESCRIPT_REACT_PACKAGE = "@rescript/react"

# Script invocations written into package.json
BUILD_SCRIPT = "bsb -make-world"
WATCH_SCRIPT = "bsb -make-world -w"
CLEAN_SCRIPT = "bsb -clean-world"

MODULE_TYPES = ["commonjs", "es6", "es6-global"]
FILE_EXTENSIONS = [".bs.js", ".js", ".mjs", ".cjs"]

DEFAULT_REGISTRY = "https://registry.npmjs.org"
FALLBACK_VERSION = "latest"


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for a single run."""
    workspace: Path = field(default_factory=Path.cwd)
    tool_name: str = TOOL_NAME
    version: str = __version__
    registry_url: str = DEFAULT_REGISTRY
    lookup_timeout: float = 5.0
    pin_versions: bool = False
    node_check: bool = True
    min_node_version: str = "12"

    def resolve(self, file: str) -> Path:
        """Resolve a workspace-relative file name."""
        return self.workspace / file
