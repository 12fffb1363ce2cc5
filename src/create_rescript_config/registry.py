"""npm registry version lookup.

Lookups never raise: any failure degrades to the fallback version.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Sequence, Union
from urllib.parse import quote

import requests

from create_rescript_config.settings import FALLBACK_VERSION, Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """Version returned by the registry."""
    version: str


@dataclass(frozen=True)
class Fallback:
    """Lookup failed; version is the fallback tag."""
    version: str = FALLBACK_VERSION
    reason: str = ""


VersionLookup = Union[Found, Fallback]


def _package_url(registry_url: str, package: str) -> str:
    # Scoped names keep their leading @ but the slash is escaped
    return f"{registry_url.rstrip('/')}/{quote(package, safe='@')}/latest"


def lookup_version(package: str, settings: Settings) -> VersionLookup:
    """Fetch the latest published version of a package."""
    url = _package_url(settings.registry_url, package)
    try:
        resp = requests.get(url, timeout=settings.lookup_timeout)
        resp.raise_for_status()
        version = resp.json().get("version")
    except requests.exceptions.Timeout:
        logger.debug("Registry lookup timed out for %s", package)
        return Fallback(reason="timeout")
    except requests.exceptions.RequestException as e:
        logger.debug("Registry lookup failed for %s: %s", package, e)
        return Fallback(reason=str(e))
    except (ValueError, AttributeError) as e:
        logger.debug("Invalid registry response for %s: %s", package, e)
        return Fallback(reason="invalid_json")

    if not isinstance(version, str) or not version:
        return Fallback(reason="missing_version")
    return Found(version)


def resolve_versions(packages: Sequence[str], settings: Settings,
                     max_workers: int = 4) -> List[VersionLookup]:
    """Look up packages concurrently, keeping input order."""
    if not packages:
        return []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(packages))) as executor:
        return list(executor.map(lambda p: lookup_version(p, settings), packages))
