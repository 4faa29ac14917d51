import typer

from appforge.cli.commands import preview, project
from appforge.config import get_settings
from appforge.logging import setup_logging

app = typer.Typer()


@app.callback()
def callback():
    """
    appforge - plan and replay project scaffolds
    """
    settings = get_settings()
    setup_logging(settings.service_name, settings.log_format, settings.log_level)


app.add_typer(project.app, name="project")
app.add_typer(preview.app, name="preview")


def run_main():
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    run_main()
