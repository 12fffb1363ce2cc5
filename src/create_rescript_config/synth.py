"""Build config and manifest synthesis.

Pure functions: given the loaded manifest and validated answers, compute
the bsconfig.json document, the merged manifest and the packages that
still need installing.
"""

from typing import List, Optional, Sequence

from create_rescript_config.manifest import ProjectManifest
from create_rescript_config.prompts import PromptAnswers
from create_rescript_config.registry import VersionLookup
from create_rescript_config.settings import (
    BUILD_SCRIPT,
    CLEAN_SCRIPT,
    REACT_DOM_PACKAGE,
    REACT_PACKAGE,
    RESCRIPT_PACKAGE,
    RESCRIPT_REACT_PACKAGE,
    WATCH_SCRIPT,
)


def make_bs_config(answers: PromptAnswers) -> dict:
    """Project answers into the bsconfig.json shape."""
    config = {
        "name": answers.name,
        "namespace": True,
        "bs-dependencies": [],
        "ppx-flags": [],
        "sources": [{"dir": answers.src, "subdirs": True}],
        "package-specs": {
            "in-source": True,
            "module": answers.module_type,
            "suffix": answers.file_extension,
        },
        "bsc-flags": [],
        "bs-dev-dependencies": [],
        "bs-external-includes": [],
        "ignored-dirs": [],
        "pinned-dependencies": [],
    }

    if answers.add_react:
        config["bs-dependencies"].append(RESCRIPT_REACT_PACKAGE)
        config["reason"] = {"react-jsx": 3}

    return config


def merge_manifest(manifest: ProjectManifest, answers: PromptAnswers) -> ProjectManifest:
    """Return a copy of the manifest with name and scripts applied.

    The name is only filled in when the manifest has none. Script names
    were checked against existing scripts while prompting, so the
    assignments never replace a user's script.
    """
    scripts = dict(manifest.scripts)
    scripts[answers.clean_command] = CLEAN_SCRIPT
    scripts[answers.build_command] = BUILD_SCRIPT
    scripts[answers.watch_command] = WATCH_SCRIPT

    return ProjectManifest(
        name=manifest.name or answers.name,
        scripts=scripts,
        dependencies=dict(manifest.dependencies),
        dev_dependencies=dict(manifest.dev_dependencies),
        raw=dict(manifest.raw),
    )


def compute_dependencies(manifest: ProjectManifest, add_react: bool) -> List[str]:
    """Packages to install, in install order, without duplicates."""
    candidates = []

    if not manifest.has_dependency(RESCRIPT_PACKAGE):
        candidates.append(RESCRIPT_PACKAGE)

    if add_react:
        if not manifest.has_dependency(REACT_PACKAGE, dev=False):
            candidates.extend([REACT_PACKAGE, REACT_DOM_PACKAGE])
        if not manifest.has_dependency(RESCRIPT_REACT_PACKAGE, dev=False):
            candidates.append(RESCRIPT_REACT_PACKAGE)

    packages = []
    for package in candidates:
        if package not in packages:
            packages.append(package)
    return packages


def package_specs(packages: Sequence[str],
                  versions: Optional[Sequence[VersionLookup]] = None) -> List[str]:
    """Format install arguments, pinned as name@version when resolved."""
    if versions is None:
        return list(packages)
    return [f"{package}@{lookup.version}" for package, lookup in zip(packages, versions)]


def make_run_message(watch_command: str, dependencies: Sequence[str], use_yarn: bool) -> str:
    """Build the shell command a user should run next."""
    if use_yarn:
        install = f"yarn add {' '.join(dependencies)}"
        run = f"yarn {watch_command}"
    else:
        install = f"npm install {' '.join(dependencies)} --save"
        run = f"npm run {watch_command}"

    if not dependencies:
        return run
    return f"{install} && {run}"


def synthesize(manifest: ProjectManifest, answers: PromptAnswers):
    """Compute (bs_config, merged_manifest, dependencies)."""
    merged = merge_manifest(manifest, answers)
    return (
        make_bs_config(answers),
        merged,
        compute_dependencies(merged, answers.add_react),
    )
