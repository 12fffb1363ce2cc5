"""Shared test fixtures for create-rescript-config.

Provides:
- workspace: temporary directory used as the current working directory
- settings: Settings bound to the workspace
- write_package_json: helper writing a package.json into the workspace
- cli_runner: Click CliRunner
- mock_node: pytest-subprocess fixture answering `node --version`
"""

import json

import pytest
from click.testing import CliRunner

from create_rescript_config.settings import Settings


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Temporary project directory, made the cwd for the test."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workspace):
    return Settings(workspace=workspace, node_check=False)


@pytest.fixture
def write_package_json(workspace):
    """Write a package.json document into the workspace."""
    def write(document):
        path = workspace / "package.json"
        path.write_text(json.dumps(document, indent=2))
        return path
    return write


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing the CLI."""
    return CliRunner()


@pytest.fixture
def mock_node(fp):
    """Answer `node --version` with a supported version.

    Use `fp` directly to simulate other versions or a missing node.
    """
    fp.register(["node", "--version"], stdout="v16.13.0\n")
    return fp
