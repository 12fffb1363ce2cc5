"""Tests for create_rescript_config.synth module."""

import pytest

from create_rescript_config.manifest import ProjectManifest
from create_rescript_config.prompts import PromptAnswers
from create_rescript_config.registry import Fallback, Found
from create_rescript_config.synth import (
    compute_dependencies,
    make_bs_config,
    make_run_message,
    merge_manifest,
    package_specs,
    synthesize,
)


def make_answers(**overrides):
    values = dict(
        name="my-app",
        src="src",
        module_type="commonjs",
        file_extension=".bs.js",
        add_react=False,
        build_command="res:build",
        watch_command="res:watch",
        clean_command="res:clean",
    )
    values.update(overrides)
    return PromptAnswers(**values)


class TestMakeBsConfig:
    """Tests for make_bs_config()."""

    def test_basic_config(self):
        config = make_bs_config(make_answers())
        assert config["name"] == "my-app"
        assert config["namespace"] is True
        assert config["sources"] == [{"dir": "src", "subdirs": True}]
        assert config["package-specs"] == {
            "in-source": True,
            "module": "commonjs",
            "suffix": ".bs.js",
        }
        assert config["bs-dependencies"] == []
        for key in ("ppx-flags", "bsc-flags", "bs-dev-dependencies",
                    "bs-external-includes", "ignored-dirs", "pinned-dependencies"):
            assert config[key] == []
        assert "reason" not in config

    def test_react_config(self):
        config = make_bs_config(make_answers(add_react=True))
        assert config["bs-dependencies"] == ["@rescript/react"]
        assert config["reason"] == {"react-jsx": 3}

    def test_module_and_suffix(self):
        config = make_bs_config(make_answers(module_type="es6-global", file_extension=".mjs"))
        assert config["package-specs"]["module"] == "es6-global"
        assert config["package-specs"]["suffix"] == ".mjs"


class TestMergeManifest:
    """Tests for merge_manifest()."""

    def test_existing_name_is_kept(self):
        merged = merge_manifest(ProjectManifest(name="original"), make_answers(name="other"))
        assert merged.name == "original"

    def test_empty_name_is_filled(self):
        merged = merge_manifest(ProjectManifest(), make_answers(name="my-app"))
        assert merged.name == "my-app"

    def test_scripts_added(self):
        merged = merge_manifest(ProjectManifest(scripts={"test": "jest"}), make_answers())
        assert merged.scripts == {
            "test": "jest",
            "res:clean": "bsb -clean-world",
            "res:build": "bsb -make-world",
            "res:watch": "bsb -make-world -w",
        }

    def test_input_manifest_not_mutated(self):
        manifest = ProjectManifest(scripts={"test": "jest"})
        merge_manifest(manifest, make_answers())
        assert manifest.scripts == {"test": "jest"}
        assert manifest.name == ""


class TestComputeDependencies:
    """Tests for compute_dependencies()."""

    def test_fresh_project(self):
        assert compute_dependencies(ProjectManifest(), add_react=False) == ["bs-platform"]

    def test_fresh_project_with_react(self):
        assert compute_dependencies(ProjectManifest(), add_react=True) == [
            "bs-platform", "react", "react-dom", "@rescript/react",
        ]

    def test_rescript_in_dev_dependencies(self):
        manifest = ProjectManifest(dev_dependencies={"bs-platform": "^9.0.0"})
        assert compute_dependencies(manifest, add_react=False) == []

    def test_react_only_counts_in_dependencies(self):
        manifest = ProjectManifest(
            dependencies={"bs-platform": "9"},
            dev_dependencies={"react": "17", "@rescript/react": "0.10"},
        )
        assert compute_dependencies(manifest, add_react=True) == [
            "react", "react-dom", "@rescript/react",
        ]

    def test_everything_present_is_idempotent(self):
        manifest = ProjectManifest(dependencies={
            "bs-platform": "9", "react": "17", "react-dom": "17", "@rescript/react": "0.10",
        })
        assert compute_dependencies(manifest, add_react=True) == []
        assert compute_dependencies(manifest, add_react=True) == []


class TestRunMessage:
    """Tests for make_run_message() and package_specs()."""

    def test_npm(self):
        message = make_run_message("res:watch", ["bs-platform"], use_yarn=False)
        assert message == "npm install bs-platform --save && npm run res:watch"

    def test_yarn(self):
        message = make_run_message("res:watch", ["bs-platform", "react"], use_yarn=True)
        assert message == "yarn add bs-platform react && yarn res:watch"

    @pytest.mark.parametrize("use_yarn,expected", [
        (False, "npm run res:watch"),
        (True, "yarn res:watch"),
    ])
    def test_no_dependencies(self, use_yarn, expected):
        assert make_run_message("res:watch", [], use_yarn) == expected

    def test_package_specs_unpinned(self):
        assert package_specs(["bs-platform"]) == ["bs-platform"]

    def test_package_specs_pinned(self):
        specs = package_specs(["bs-platform", "react"], [Found("9.0.2"), Fallback()])
        assert specs == ["bs-platform@9.0.2", "react@latest"]


class TestSynthesize:
    """Tests for synthesize()."""

    def test_returns_config_manifest_and_dependencies(self):
        config, merged, dependencies = synthesize(ProjectManifest(), make_answers(add_react=True))
        assert config["bs-dependencies"] == ["@rescript/react"]
        assert merged.name == "my-app"
        assert dependencies[0] == "bs-platform"
