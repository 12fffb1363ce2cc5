"""Main CLI entry point for create-rescript-config."""

import logging
from pathlib import Path

import click
from rich.logging import RichHandler
from rich.markup import escape

from create_rescript_config import __version__
from create_rescript_config.commands.create import run
from create_rescript_config.errors import NodeNotFoundError, NodeVersionError
from create_rescript_config.runtime import check_node_version
from create_rescript_config.settings import DEFAULT_REGISTRY, TOOL_NAME, Settings
from create_rescript_config.ui import presenter
from create_rescript_config.ui.presenter import console


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.command()
@click.version_option(version=__version__, prog_name="create-rescript-config")
@click.option(
    "--pin",
    is_flag=True,
    help="Resolve latest versions from the registry for the install command",
)
@click.option(
    "--registry",
    default=DEFAULT_REGISTRY,
    show_default=True,
    help="Registry used with --pin",
)
@click.option(
    "--node-check/--no-node-check",
    default=True,
    help="Check the installed node version first (default: yes)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(pin: bool, registry: str, node_check: bool, verbose: bool):
    """Create bsconfig.json and ReScript scripts in the current directory.

    \b
    Asks for the project name, source directory, module format, file
    extension, React support and script names, then writes:
      package.json      merged name and scripts
      bsconfig.json     build configuration
      <src>/Index.res   starter file (only for a new source directory)
    """
    _configure_logging(verbose)

    settings = Settings(
        workspace=Path.cwd(),
        tool_name=TOOL_NAME,
        version=__version__,
        registry_url=registry,
        pin_versions=pin,
        node_check=node_check,
    )

    presenter.clear(settings)

    if settings.node_check:
        try:
            check_node_version(settings.min_node_version)
        except NodeNotFoundError as e:
            presenter.print_warning(f"{escape(str(e))}, skipping version check")
        except NodeVersionError as e:
            presenter.print_abort(escape(str(e)))
            return

    run(settings)


if __name__ == "__main__":
    main()
