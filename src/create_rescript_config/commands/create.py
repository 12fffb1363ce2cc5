"""Interactive bsconfig.json / package.json generation."""

import logging
from typing import List, Optional

from create_rescript_config.manifest import load_manifest
from create_rescript_config.prompts import ask, confirm_proceed
from create_rescript_config.registry import resolve_versions
from create_rescript_config.settings import BS_CONFIG, PACKAGE_JSON, YARN_LOCK, Settings
from create_rescript_config.synth import make_run_message, package_specs, synthesize
from create_rescript_config.ui import presenter
from create_rescript_config.writer import WriteOutcome, to_json, workspace_has, write_all

logger = logging.getLogger(__name__)


def run(settings: Settings) -> Optional[List[WriteOutcome]]:
    """Run a full session in the settings' workspace.

    Returns:
        Write outcomes, or None if the run was aborted or declined
    """
    if workspace_has(settings, BS_CONFIG):
        presenter.print_file_present(BS_CONFIG)
        return None

    use_yarn = workspace_has(settings, YARN_LOCK)
    manifest = load_manifest(settings)
    logger.debug("Loaded manifest %r (yarn=%s)", manifest.name, use_yarn)

    answers = ask(manifest, use_yarn)
    bs_config, merged, dependencies = synthesize(manifest, answers)
    manifest_document = merged.to_dict()

    presenter.clear(settings)
    presenter.print_manifest_preview(PACKAGE_JSON, to_json(manifest_document))

    if not confirm_proceed():
        logger.debug("Declined, nothing written")
        return None

    versions = None
    if settings.pin_versions and dependencies:
        versions = resolve_versions(dependencies, settings)
    run_message = make_run_message(
        answers.watch_command,
        package_specs(dependencies, versions),
        use_yarn,
    )

    outcomes = write_all(settings, manifest_document, bs_config)

    presenter.clear(settings)
    presenter.print_outcomes(outcomes)
    presenter.print_run_message(run_message)
    return outcomes
