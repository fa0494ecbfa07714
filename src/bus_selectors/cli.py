"""CLI interface for bus-selectors.

Requires the 'cli' extra: pip install bus-selectors[cli]
"""

from __future__ import annotations

import importlib
import sys

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install bus-selectors[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from bus_selectors import __version__
from bus_selectors.exceptions import InvalidPatternError
from bus_selectors.models.match import evaluate
from bus_selectors.selectors.regex import RegexSelector

app = typer.Typer(
    name="bus-selectors",
    help="Routing-key selectors for event-bus dispatch.",
    add_completion=False,
)
console = Console()


def _compile(pattern: str) -> RegexSelector:
    try:
        return RegexSelector(pattern)
    except InvalidPatternError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"bus-selectors {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the bus-selectors installation."""
    table = Table(title="bus-selectors info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "typer", "rich"]:
        try:
            mod = importlib.import_module(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def match(
    pattern: str = typer.Argument(..., help="Regular expression the keys must fully match"),
    keys: list[str] = typer.Argument(..., help="Keys to test against the pattern"),  # noqa: B008
) -> None:
    """Test keys against a regex selector and show the extracted headers."""
    selector = _compile(pattern)

    table = Table(title=f"Selector {escape(pattern)}")
    table.add_column("Key", style="cyan")
    table.add_column("Matched")
    table.add_column("Headers", style="green")

    any_matched = False
    for key in keys:
        result = evaluate(selector, key)
        any_matched = any_matched or result.matched
        matched = "[green]yes[/green]" if result.matched else "[red]no[/red]"
        headers = "" if result.headers is None else escape(repr(result.headers))
        table.add_row(escape(key), matched, headers)

    console.print(table)
    if not any_matched:
        raise typer.Exit(code=1)


@app.command()
def groups(
    pattern: str = typer.Argument(..., help="Regular expression to inspect"),
) -> None:
    """List the header names a match of the pattern produces."""
    selector = _compile(pattern)
    if selector.groups == 0:
        console.print("[dim]No capturing groups; matches produce empty headers.[/dim]")
        return
    for i in range(1, selector.groups + 1):
        console.print(f"group{i}")


if __name__ == "__main__":
    app()
