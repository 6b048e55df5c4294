import json as json_lib

from rich.console import Console
from rich.table import Table
import typer

from handover.cli.client import APIClient

app = typer.Typer()
console = Console()
client = APIClient()


@app.command()
def show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the checklist field schema."""
    try:
        config = client.get("/api/settings/checklist")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1) from e

    if json_output:
        typer.echo(json_lib.dumps(config, indent=2))
        return

    for kind in ("sales", "launch"):
        table = Table(title=f"{kind.title()} checklist (v{config.get('version', '?')})")
        table.add_column("ID", style="cyan")
        table.add_column("Label")
        table.add_column("Type", style="magenta")
        table.add_column("Optional", justify="center")
        for field in config.get(kind, []):
            table.add_row(
                field["id"],
                field.get("label", ""),
                field["type"],
                "yes" if field.get("optional") else "",
            )
            for sub in field.get("fields") or []:
                table.add_row(
                    f"  {field['id']}.{sub['id']}",
                    sub.get("label", ""),
                    sub["type"],
                    "yes" if sub.get("optional") else "",
                )
        console.print(table)


@app.command()
def integrations(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the integrations catalogue."""
    try:
        catalogue = client.get("/api/settings/integrations")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1) from e

    if json_output:
        typer.echo(json_lib.dumps(catalogue, indent=2))
        return

    table = Table(title="Integrations")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Requirements")
    for integration in catalogue:
        table.add_row(
            integration["id"],
            integration.get("name", ""),
            integration.get("category", ""),
            "\n".join(integration.get("requirements", [])),
        )
    console.print(table)
