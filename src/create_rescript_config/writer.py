"""File output for a confirmed run.

package.json, bsconfig.json and the optional starter source file are
written concurrently. Each write reports its own outcome; a failure in
one never stops the others.
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from create_rescript_config.settings import BS_CONFIG, PACKAGE_JSON, Settings

logger = logging.getLogger(__name__)

STARTER_FILE = "Index.res"
STARTER_PROGRAM = (
    "// Generated by create-rescript-config\n\n"
    'let default = () => "Hello, world!"->Js.log'
)


@dataclass(frozen=True)
class WriteOutcome:
    """Result of writing one file."""
    path: str
    ok: bool
    error: Optional[str] = None


def to_json(document: dict) -> str:
    """Serialize with a two-space indent.

    Lone surrogates (valid in parsed JSON, not encodable as UTF-8) are
    written back as \\uXXXX escapes.
    """
    text = json.dumps(document, indent=2, ensure_ascii=False)
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def write_json(settings: Settings, file: str, document: dict) -> WriteOutcome:
    """Serialize a document to a workspace file."""
    try:
        settings.resolve(file).write_text(to_json(document), encoding="utf-8")
    except (OSError, ValueError) as e:
        logger.debug("Failed to write %s: %s", file, e)
        return WriteOutcome(file, ok=False, error=str(e))
    return WriteOutcome(file, ok=True)


def write_src_directory(settings: Settings, bs_config: dict) -> List[WriteOutcome]:
    """Create the source directory with a starter file.

    Nothing is written when the directory already exists.
    """
    source = bs_config["sources"][0]
    directory = settings.resolve(source["dir"])

    if directory.exists():
        logger.debug("Source directory %s exists, skipping starter file", directory)
        return []

    full_path = f"{source['dir']}/{STARTER_FILE}"

    try:
        directory.mkdir(parents=True)
    except OSError as e:
        logger.debug("Failed to create %s: %s", directory, e)
        return [WriteOutcome(source["dir"], ok=False, error=str(e))]

    try:
        (directory / STARTER_FILE).write_text(STARTER_PROGRAM, encoding="utf-8")
    except OSError as e:
        logger.debug("Failed to write %s: %s", full_path, e)
        return [WriteOutcome(full_path, ok=False, error=str(e))]

    return [WriteOutcome(full_path, ok=True)]


def write_all(settings: Settings, manifest: dict, bs_config: dict) -> List[WriteOutcome]:
    """Write every output file and wait for all writes to settle.

    Returns:
        Outcomes in order: package.json, bsconfig.json, starter file
    """
    with ThreadPoolExecutor(max_workers=3) as executor:
        manifest_future = executor.submit(write_json, settings, PACKAGE_JSON, manifest)
        config_future = executor.submit(write_json, settings, BS_CONFIG, bs_config)
        src_future = executor.submit(write_src_directory, settings, bs_config)

        outcomes = [manifest_future.result(), config_future.result()]
        outcomes.extend(src_future.result())

    return outcomes


def workspace_has(settings: Settings, file: str) -> bool:
    return settings.resolve(file).exists()
