"""Project manifest (package.json) loading.

The manifest is read once, tolerantly: a missing or malformed file is
treated as an empty record. Unknown keys are preserved so the rewritten
file only differs in the fields this tool sets.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from create_rescript_config.settings import PACKAGE_JSON, Settings

logger = logging.getLogger(__name__)


@dataclass
class ProjectManifest:
    """In-memory view of package.json."""
    name: str = ""
    scripts: Dict[str, str] = field(default_factory=dict)
    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)
    # Original document, used to keep unrelated keys and their order
    raw: Dict[str, Any] = field(default_factory=dict)

    def has_dependency(self, package: str, dev: bool = True) -> bool:
        """Check whether a package is already declared.

        Args:
            package: Package name
            dev: Also look in devDependencies
        """
        if package in self.dependencies:
            return True
        return dev and package in self.dev_dependencies

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = dict(self.raw)
        data["name"] = self.name
        data["scripts"] = dict(self.scripts)
        data["dependencies"] = dict(self.dependencies)
        data["devDependencies"] = dict(self.dev_dependencies)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectManifest":
        """Create from a parsed document, defaulting missing sections."""
        return cls(
            name=_string(data.get("name")),
            scripts=_mapping(data.get("scripts")),
            dependencies=_mapping(data.get("dependencies")),
            dev_dependencies=_mapping(data.get("devDependencies")),
            raw=dict(data),
        )


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _mapping(value: Any) -> Dict[str, str]:
    return dict(value) if isinstance(value, dict) else {}


def read_manifest_data(settings: Settings) -> dict:
    """Read and parse package.json, returning {} when absent or invalid."""
    path = settings.resolve(PACKAGE_JSON)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug("No %s in %s", PACKAGE_JSON, settings.workspace)
        return {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Ignoring unreadable %s: %s", PACKAGE_JSON, e)
        return {}

    if not isinstance(data, dict):
        logger.debug("Ignoring %s: top level is not an object", PACKAGE_JSON)
        return {}
    return data


def load_manifest(settings: Settings) -> ProjectManifest:
    """Load package.json from the workspace with defaults applied."""
    return ProjectManifest.from_dict(read_manifest_data(settings))
