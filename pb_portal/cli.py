from typing import Optional
import typer
import asyncio
import logging
from typing_extensions import Annotated
from rich.console import Console
from rich.table import Table

from pb_portal.client.portal import PortalClient
from pb_portal.exceptions import DuplicateAccountError, PortalError
from pb_portal.fixtures import DEMO_USERS

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()

ConfigOption = Annotated[
    str, typer.Option(help="Path to the configuration JSON file.")
]


def load_client(config: str) -> PortalClient:
    """Build the portal client or exit with a readable error."""
    try:
        return PortalClient(config_path=config)
    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.command()
def seed(config: ConfigOption = "config.json"):
    """
    Load the demo users, applications, settings and rubric into the remote database.
    """
    client = load_client(config)
    try:
        with console.status("[bold green]Seeding database...", spinner="dots"):
            counts = asyncio.run(client.seed_database())
    except PortalError as e:
        console.print(f"[bold red]Seeding failed:[/bold red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Seeded documents")
    table.add_column("Collection")
    table.add_column("Documents", justify="right")
    for collection, count in counts.items():
        table.add_row(collection, str(count))
    console.print(table)


@app.command("provision-identities")
def provision_identities(config: ConfigOption = "config.json"):
    """
    Create login credentials for the demo users (server-side operator task).
    """
    client = load_client(config)
    if client.identity is None:
        console.print(
            "[bold red]Error:[/bold red] Identities are only provisioned in remote mode."
        )
        raise typer.Exit(code=1)

    for user in DEMO_USERS:
        try:
            client.identity.create_identity(
                user["email"],
                user["password"],
                uid=user["uid"],
                display_name=user.get("displayName"),
            )
            console.print(f"[green]Created[/green] {user['email']}")
        except DuplicateAccountError:
            console.print(f"[yellow]Exists[/yellow] {user['email']}")


@app.command()
def users(config: ConfigOption = "config.json"):
    """
    List portal users.
    """
    client = load_client(config)
    table = Table(title="Users")
    for column in ("UID", "Email", "Name", "Role", "Area"):
        table.add_column(column)
    for user in asyncio.run(client.api.get_users()):
        table.add_row(
            user.uid, user.email, user.display_name, user.role.value, user.area or "-"
        )
    console.print(table)


@app.command()
def applications(
    config: ConfigOption = "config.json",
    area: Annotated[
        Optional[str], typer.Option(help="Only show this area (Cross-Area always shown).")
    ] = None,
):
    """
    List applications, optionally filtered by area.
    """
    client = load_client(config)
    table = Table(title=f"Applications ({area or 'All'})")
    for column in ("Ref", "Title", "Organisation", "Area", "Status"):
        table.add_column(column)
    for application in asyncio.run(client.api.get_applications(area)):
        table.add_row(
            application.ref or "-",
            application.project_title,
            application.org_name,
            application.area or "-",
            application.status.value,
        )
    console.print(table)


@app.command()
def scores(config: ConfigOption = "config.json"):
    """
    List committee scores with their weighted totals.
    """
    client = load_client(config)
    table = Table(title="Scores")
    for column in ("Application", "Scorer", "Raw", "Weighted %", "Final"):
        table.add_column(column)
    for score in asyncio.run(client.api.get_scores()):
        summary = client.summarize(score)
        colour = "green" if summary.passes else "red"
        table.add_row(
            score.app_id,
            score.scorer_name,
            str(summary.raw_total),
            f"[{colour}]{summary.weighted_percent}%[/{colour}]",
            "yes" if score.is_final else "no",
        )
    console.print(table)


@app.command()
def settings(
    config: ConfigOption = "config.json",
    stage1: Annotated[
        Optional[bool], typer.Option("--stage1/--no-stage1", help="Stage 1 visibility.")
    ] = None,
    stage2: Annotated[
        Optional[bool], typer.Option("--stage2/--no-stage2", help="Stage 2 visibility.")
    ] = None,
    voting: Annotated[
        Optional[bool], typer.Option("--voting/--no-voting", help="Whether voting is open.")
    ] = None,
):
    """
    Show portal settings, updating any that are given.
    """
    client = load_client(config)
    current = asyncio.run(client.api.get_portal_settings())

    changes = {
        "stage1_visible": stage1,
        "stage2_visible": stage2,
        "voting_open": voting,
    }
    changes = {k: v for k, v in changes.items() if v is not None}
    if changes:
        current = current.model_copy(update=changes)
        asyncio.run(client.api.update_portal_settings(current))

    console.print(f"Stage 1 visible: [bold]{current.stage1_visible}[/bold]")
    console.print(f"Stage 2 visible: [bold]{current.stage2_visible}[/bold]")
    console.print(f"Voting open:     [bold]{current.voting_open}[/bold]")


if __name__ == "__main__":
    app()
