"""User-facing output.

Formatting only: every function takes what it renders as arguments and
prints through the shared console.
"""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from create_rescript_config.settings import Settings
from create_rescript_config.ui.theme import THEME, Symbols
from create_rescript_config.writer import WriteOutcome

console = Console(theme=THEME)


def banner_text(settings: Settings) -> str:
    return f"[title]{escape(settings.tool_name)}[/] [version]v{escape(settings.version)}[/]"


def clear(settings: Settings) -> None:
    """Clear the screen and redraw the banner."""
    console.clear()
    console.print(Panel.fit(banner_text(settings), border_style="blue"))
    console.print()


def print_abort(message: str) -> None:
    console.print(f"[error]Aborting[/]: {message}", soft_wrap=True)
    console.print()


def print_warning(message: str) -> None:
    console.print(f"[warning]Warning[/]: {message}", soft_wrap=True)
    console.print()


def print_file_present(file: str) -> None:
    print_abort(f"[file]{escape(file)}[/] file already present in current directory.")


def print_manifest_preview(file: str, document: str) -> None:
    """Show the pending manifest before asking to continue."""
    console.print(f"[file]{escape(file)}[/] will be overwritten with:")
    console.print()
    console.print(document, markup=False, highlight=False, soft_wrap=True)


def outcome_line(outcome: WriteOutcome) -> str:
    path = escape(outcome.path)
    if outcome.ok:
        return f"[success]{Symbols.COMPLETE} Success[/]: wrote [file]{path}[/]"
    return f"[error]{Symbols.FAILED} Error[/]: Unable to write [file]{path}[/]"


def print_outcomes(outcomes: Iterable[WriteOutcome]) -> None:
    for outcome in outcomes:
        console.print(outcome_line(outcome), soft_wrap=True)


def print_run_message(run_message: str) -> None:
    console.print()
    console.print("Now run:")
    console.print()
    console.print(f"  [command]{escape(run_message)}[/]", soft_wrap=True)
    console.print()
