"""
storydoc CLI - Component Documentation Generator

A command-line tool for turning component stories files into Markdown:
1. Locating each component's stories file
2. Extracting the component description, examples and API reference
3. Writing one Markdown document per component
"""

import json
import logging
from pathlib import Path
from typing import Optional, List

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from storydoc import __version__
from storydoc.config import Settings
from storydoc.generator import StoryDocGenerator

app = typer.Typer(
    name="storydoc",
    help="Generate Markdown documentation from component stories files",
    add_completion=False,
)

console = Console()


def _configure_logging(level: str) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _build_settings(verbose: bool = False, **overrides) -> Settings:
    try:
        settings = Settings.from_env(**overrides)
    except ValidationError as e:
        console.print(f"[red]❌ Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    _configure_logging("DEBUG" if verbose else settings.log_level)
    return settings


@app.command()
def generate(
    components: Optional[List[str]] = typer.Argument(
        None,
        help="Component names (package directory names) to document",
    ),
    all_components: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Document every component in the packages directory",
    ),
    packages_dir: Optional[Path] = typer.Option(
        None,
        "--packages-dir",
        "-p",
        help="Directory holding one subdirectory per component (default: ./packages)",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for generated Markdown (default: beside each component)",
    ),
    examples_heading: Optional[str] = typer.Option(
        None,
        "--examples-heading",
        help="Heading of the examples section (default: Examples)",
    ),
    code_language: Optional[str] = typer.Option(
        None,
        "--code-language",
        help="Fence language for example code blocks (default: tsx)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """
    Generate Markdown documentation for components.

    Example (selected components):
        storydoc generate Button Input --output-dir docs/components

    Example (all components):
        storydoc generate --all --packages-dir packages
    """
    if not components and not all_components:
        console.print("[red]Error: pass component names or --all[/red]")
        raise typer.Exit(1)

    settings = _build_settings(
        verbose,
        packages_dir=packages_dir,
        output_dir=output_dir,
        examples_heading=examples_heading,
        code_language=code_language,
    )
    generator = StoryDocGenerator(settings)

    try:
        if all_components:
            names = generator.scanner.list_components()
            console.print(f"📦 Found {len(names)} components: {', '.join(names)}")
        else:
            names = components
        summary = generator.generate(names)
    except ValueError as e:
        console.print(f"\n[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Component")
    table.add_column("Status")
    table.add_column("Examples", justify="right")
    table.add_column("Output / Error")

    for result in summary.results:
        if result.success:
            table.add_row(
                result.component_name,
                "[green]✅ ok[/green]",
                str(result.total_examples),
                result.output_path or "",
            )
        else:
            table.add_row(
                result.component_name,
                "[red]❌ failed[/red]",
                "-",
                result.error or "",
            )

    console.print(table)
    console.print(
        f"\n[bold]Done:[/bold] {len(summary.succeeded)} succeeded, "
        f"{len(summary.failed)} failed"
    )

    if summary.failed:
        raise typer.Exit(1)


@app.command()
def parse(
    stories_file: Path = typer.Argument(..., help="Path to a stories file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """Print the data extracted from a stories file as JSON."""
    settings = _build_settings(verbose)
    generator = StoryDocGenerator(settings)

    try:
        data = generator.extract_file(stories_file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    typer.echo(json.dumps(data.model_dump(), indent=2, ensure_ascii=False))


@app.command()
def render(
    stories_file: Path = typer.Argument(..., help="Path to a stories file"),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Document title (default: derived from the file path)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the Markdown here instead of stdout",
    ),
    examples_heading: Optional[str] = typer.Option(None, "--examples-heading"),
    code_language: Optional[str] = typer.Option(None, "--code-language"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """Render one stories file as Markdown."""
    settings = _build_settings(
        verbose,
        examples_heading=examples_heading,
        code_language=code_language,
    )
    generator = StoryDocGenerator(settings)

    try:
        markdown = generator.render_file(stories_file, component_name=name)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding='utf-8')
        console.print(f"📄 Written: [cyan]{output}[/cyan]")
    else:
        typer.echo(markdown, nl=False)


@app.command("list")
def list_command(
    packages_dir: Optional[Path] = typer.Option(
        None,
        "--packages-dir",
        "-p",
        help="Directory holding one subdirectory per component (default: ./packages)",
    ),
):
    """List components and whether each has a stories file."""
    settings = _build_settings(packages_dir=packages_dir)
    generator = StoryDocGenerator(settings)

    try:
        names = generator.scanner.list_components()
    except ValueError as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Component")
    table.add_column("Stories")

    for component_name in names:
        has_stories = generator.scanner.has_stories(component_name)
        table.add_row(component_name, "[green]yes[/green]" if has_stories else "[yellow]missing[/yellow]")

    console.print(table)


@app.command()
def version():
    """Show the version of storydoc."""
    console.print(f"[bold cyan]storydoc[/bold cyan] v{__version__}")
    console.print("Component Documentation Generator")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
