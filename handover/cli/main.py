import typer

from handover.cli.commands import projects, settings

app = typer.Typer(
    name="handover",
    help="CLI for the merchant handover tracker",
    add_completion=False,
)

app.add_typer(projects.app, name="projects", help="Manage projects")
app.add_typer(settings.app, name="settings", help="Checklist settings")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(8000, envvar="PORT", help="Bind port"),
):
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("handover.api.main:app", host=host, port=port)


if __name__ == "__main__":
    app()
