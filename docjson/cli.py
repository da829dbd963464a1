"""
docjson CLI - component library API documentation generator.

Builds docs.json for a component library checkout:
1. Extracts component metadata with react-docgen
2. Extracts functional module docs with documentation.js
3. Normalizes props, methods and style attributes
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from docjson import __version__
from docjson.builder import DocJSONBuilder
from docjson.config import BuilderConfig

app = typer.Typer(
    name="docjson",
    help="Component library API documentation generator",
    add_completion=False,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def generate(
    root: str = typer.Option(".", "--root", "-r", help="Library checkout root (default: current directory)"),
    style_spec: Optional[str] = typer.Option(
        None,
        "--style-spec",
        "-s",
        help="Style specification JSON used to document layer styles",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: <root>/docs/docs.json)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """
    Generate docs.json from component and module sources.

    Example:
        docjson generate --root . --style-spec scripts/styleSpec.json
    """
    _configure_logging(verbose)

    config = BuilderConfig.from_root(
        Path(root),
        output_path=Path(output).resolve() if output else None,
        style_spec_path=Path(style_spec).resolve() if style_spec else None,
    )

    console.print(Panel.fit(
        "[bold cyan]docs.json Generation[/bold cyan]\n\n"
        f"Components: [yellow]{config.component_path}[/yellow]\n"
        f"Modules: [yellow]{config.modules_path}[/yellow]\n"
        f"Style spec: [yellow]{config.style_spec_path or 'none'}[/yellow]\n"
        f"Output: [yellow]{config.output_path}[/yellow]",
        border_style="cyan"
    ))

    try:
        document = DocJSONBuilder(config).generate_sync()
    except Exception as e:
        console.print(f"\n[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    units = document.root
    summary_table = Table(show_header=True, header_style="bold cyan")
    summary_table.add_column("Metric")
    summary_table.add_column("Value", justify="right")
    summary_table.add_row("Units", str(len(units)))
    summary_table.add_row("Props", str(sum(len(u.props) for u in units.values())))
    summary_table.add_row("Methods", str(sum(len(u.methods) for u in units.values())))
    summary_table.add_row("Styled units", str(sum(1 for u in units.values() if u.styles)))

    console.print("\n[bold green]✅ Generation Complete![/bold green]\n")
    console.print(summary_table)
    console.print(f"\n📄 docs.json: [cyan]{config.output_path}[/cyan]")


@app.command()
def version():
    """Show docjson version."""
    console.print(f"docjson version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
