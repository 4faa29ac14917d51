import asyncio
import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from appforge.ai import GeminiClient, parse_code_into_files
from appforge.config import get_settings
from appforge.scaffold import preview_from_prompt

app = typer.Typer()
console = Console()


def _print_files(file_map: dict[str, str], json_output: bool) -> None:
    if json_output:
        typer.echo(json.dumps(file_map, indent=2))
        return
    table = Table("File", "Bytes")
    for name, content in file_map.items():
        table.add_row(name, str(len(content.encode("utf-8"))))
    console.print(table)


@app.command()
def demux(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Generated HTML"),
    json_output: bool = typer.Option(False, "--json", help="Dump file contents as JSON"),
):
    """Split one generated HTML document into index.html, styles.css and script.js"""
    code = source.read_text(encoding="utf-8")
    _print_files(parse_code_into_files(code), json_output)


@app.command()
def generate(
    prompt: str = typer.Argument(..., help="What the web app should do"),
    json_output: bool = typer.Option(False, "--json", help="Dump file contents as JSON"),
):
    """Ask the AI provider for a web app and show the resulting preview files"""
    client = GeminiClient.from_settings(get_settings())
    result = asyncio.run(preview_from_prompt(prompt, client))

    if result.error:
        console.print(f"[bold red]Error:[/bold red] {escape(result.error)}")
        raise typer.Exit(code=1)

    _print_files(result.files, json_output)
