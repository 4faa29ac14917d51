import asyncio
import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from appforge.config import AppForgeSettings, get_settings
from appforge.execution import ExecutionEngine, SimulatedBackend
from appforge.models.project import ProjectConfig, ProjectConfigError
from appforge.models.session import ProjectSession
from appforge.planning import CommandPlanner, FileTreeGenerator
from appforge.scaffold import ScaffoldReport, Scaffolder
from appforge.sessions import InMemorySessionStore, SessionManager, build_session_store

app = typer.Typer()
console = Console()

ConfigArg = typer.Argument(..., exists=True, dir_okay=False, help="Project config (JSON)")


def load_config_or_exit(path: Path) -> ProjectConfig:
    try:
        return ProjectConfig.from_file(path)
    except ProjectConfigError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        for error in e.errors:
            console.print(f"  - {escape(error)}")
        raise typer.Exit(code=1) from None


def build_scaffolder(settings: AppForgeSettings) -> Scaffolder:
    backend = SimulatedBackend(
        command_delay=settings.command_delay_ms / 1000,
        file_delay=settings.file_delay_ms / 1000,
    )
    manager = SessionManager(build_session_store(settings), settings.sessions_base_path)
    return Scaffolder(manager, ExecutionEngine(backend))


async def _draft_session(config: ProjectConfig) -> ProjectSession:
    """Session used only for planning output; registered in a throwaway store."""
    manager = SessionManager(InMemorySessionStore(), get_settings().sessions_base_path)
    return await manager.create_session(config)


@app.command()
def plan(
    config_path: Path = ConfigArg,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Print the ordered command plan for a project"""
    config = load_config_or_exit(config_path)
    session = asyncio.run(_draft_session(config))
    commands = CommandPlanner.generate_init_commands(session)

    if json_output:
        typer.echo(json.dumps({"session_id": session.id, "commands": commands}, indent=2))
        return

    console.print(f"Session: [cyan]{session.id}[/cyan]")
    for position, command in enumerate(commands, start=1):
        console.print(f"[dim]{position:>3}.[/dim] {escape(command)}", highlight=False)


@app.command()
def files(
    config_path: Path = ConfigArg,
    json_output: bool = typer.Option(False, "--json", help="Dump the whole file map as JSON"),
):
    """Print the files generated for a project"""
    config = load_config_or_exit(config_path)
    session = asyncio.run(_draft_session(config))
    file_map = FileTreeGenerator.generate_file_structure(session)

    if json_output:
        typer.echo(json.dumps(file_map, indent=2))
        return

    if not file_map:
        console.print("[yellow]No files are generated for this combination.[/yellow]")
        return

    table = Table("Path", "Bytes")
    for path, content in file_map.items():
        table.add_row(path, str(len(content.encode("utf-8"))))
    console.print(table)


async def _run_scaffold(scaffolder: Scaffolder, config: ProjectConfig) -> ScaffoldReport:
    try:
        return await scaffolder.scaffold(config)
    finally:
        await scaffolder.session_manager.close()


def render_report(report: ScaffoldReport) -> None:
    console.print(f"Session: [cyan]{report.session.id}[/cyan]")
    console.print(f"Working path: [magenta]{report.session.working_path}[/magenta]")
    for result in report.command_results + report.file_results:
        mark = "[green]✓[/green]" if result.success else "[red]✗[/red]"
        line = result.output if result.success else result.error
        console.print(f"{mark} {escape(line or '')}", highlight=False)


@app.command()
def scaffold(config_path: Path = ConfigArg):
    """Create a session and replay the project's commands and files"""
    config = load_config_or_exit(config_path)
    scaffolder = build_scaffolder(get_settings())

    report = asyncio.run(_run_scaffold(scaffolder, config))
    render_report(report)

    if not report.success:
        console.print(f"[bold red]Error:[/bold red] {escape(report.failure or '')}")
        raise typer.Exit(code=1)

    console.print("[bold green]✓ Project scaffolded successfully![/bold green]")
