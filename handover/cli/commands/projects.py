import json as json_lib

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
import typer

from handover.cli.client import APIClient

app = typer.Typer()
console = Console()
client = APIClient()


def _fail(e: Exception) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {str(e)}")
    return typer.Exit(1)


@app.command("list")
def list_projects(
    completion: str = typer.Option("all", "--completion", "-c", help="all, active or completed"),
    status: str | None = typer.Option(None, "--status", "-s", help="Filter by status"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List projects with their progress."""
    params = {"completion": completion}
    if status:
        params["status"] = status
    try:
        projects = client.get("/api/projects", params=params)
    except Exception as e:
        raise _fail(e) from e

    if json_output:
        typer.echo(json_lib.dumps(projects, indent=2))
        return

    table = Table(title="Projects")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Brand", style="magenta")
    table.add_column("Status", style="green")
    table.add_column("Sales", justify="right")
    table.add_column("Launch", justify="right")
    table.add_column("Overall", justify="right")

    for p in projects:
        progress = p.get("progress", {})
        table.add_row(
            p["id"],
            p.get("brandName", ""),
            p.get("status", ""),
            f"{progress.get('salesCompletion', 0)}%",
            f"{progress.get('launchCompletion', 0)}%",
            f"{progress.get('overall', 0)}%",
        )

    console.print(table)


@app.command()
def get(
    project_id: str,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show a single project."""
    try:
        project = client.get(f"/api/projects/{project_id}")
    except Exception as e:
        raise _fail(e) from e

    if json_output:
        typer.echo(json_lib.dumps(project, indent=2))
        return

    progress = project.get("progress", {})
    console.print(f"[bold]{project['brandName']}[/bold] ({project['id']})")
    console.print(f"Status: [yellow]{project['status']}[/yellow]  Version: v{project['version']}")
    console.print(
        f"Sales {progress.get('salesCompletion', 0)}% | "
        f"Launch {progress.get('launchCompletion', 0)}% | "
        f"Overall {progress.get('overall', 0)}%"
    )


@app.command()
def create(
    brand_name: str = typer.Option(..., "--brand", "-b", help="Brand name"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Create a new project."""
    try:
        project = client.post("/api/projects", json={"brandName": brand_name})
    except Exception as e:
        raise _fail(e) from e

    if json_output:
        typer.echo(json_lib.dumps(project, indent=2))
        return

    console.print("[bold green]✓ Project created[/bold green]")
    console.print(f"ID: [cyan]{project['id']}[/cyan]")


@app.command()
def email(
    project_id: str,
    user_name: str | None = typer.Option(None, "--from", help="Sender name for the signature"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Draft the missing-information email for a project."""
    params = {"userName": user_name} if user_name else None
    try:
        draft = client.get(f"/api/projects/{project_id}/email", params=params)
    except Exception as e:
        raise _fail(e) from e

    if json_output:
        typer.echo(json_lib.dumps(draft, indent=2))
        return

    console.print(f"To: [cyan]{draft['to'] or '-'}[/cyan]")
    console.print(f"Subject: [bold]{draft['subject']}[/bold]")
    console.print(Panel(draft["fullBody"], expand=False))


@app.command()
def report(project_id: str):
    """Print the Markdown handover report."""
    try:
        typer.echo(client.get_text(f"/api/projects/{project_id}/report"))
    except Exception as e:
        raise _fail(e) from e


@app.command()
def delete(
    project_id: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a project and its checklists."""
    if not yes:
        typer.confirm(f"Delete project {project_id}?", abort=True)
    try:
        client.delete(f"/api/projects/{project_id}")
    except Exception as e:
        raise _fail(e) from e

    console.print(f"[bold green]✓ Project {project_id} deleted[/bold green]")
