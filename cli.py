"""CLI commands for event RSVP management."""

import asyncio
from pathlib import Path

import typer

from src.clients.admin_console import AdminConsole, AdminConsoleError
from src.clients.rsvp_form import RSVPFormClient
from src.config.logging import setup_logging
from src.config.settings import get_settings
from src.rsvps.calendar import EventDetails, build_invite
from src.rsvps.errors import StorageError
from src.rsvps.repository import create_storage

app = typer.Typer(help="CLI commands for event RSVP management")

DEFAULT_URL = "http://localhost:3000"


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Interface to bind, defaults to APP_HOST"),
    port: int = typer.Option(None, "--port", "-p", help="Port to listen on, defaults to PORT"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the web server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:build_app",
        factory=True,
        host=host or settings.app_host,
        port=port or settings.port,
        reload=reload,
    )


@app.command()
def init_db():
    """Connect to the configured storage, creating the table or index if needed."""
    settings = get_settings()
    setup_logging(settings)

    async def _init():
        storage = create_storage(settings)
        try:
            await storage.connect()
            return await storage.count()
        finally:
            await storage.close()

    try:
        count = asyncio.run(_init())
    except StorageError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Storage ready!", fg=typer.colors.GREEN)
    typer.secho(f"  Target: {settings.database_url}", fg=typer.colors.BLUE)
    typer.secho(f"  RSVPs stored: {count}", fg=typer.colors.CYAN)


@app.command()
def submit(
    name: str = typer.Option(..., "--name", "-n", help="Guest name"),
    guests: int = typer.Option(1, "--guests", "-g", help="Number of guests"),
    email: str = typer.Option(None, "--email", "-e"),
    phone: str = typer.Option(None, "--phone"),
    attending: str = typer.Option(None, "--attending", "-a", help="yes, no or maybe"),
    meal: str = typer.Option(None, "--meal"),
    allergies: str = typer.Option(None, "--allergies"),
    message: str = typer.Option(None, "--message", "-m"),
    url: str = typer.Option(DEFAULT_URL, "--url", help="Base URL of the RSVP server"),
):
    """Submit an RSVP through the public form endpoint."""
    settings = get_settings()
    client = RSVPFormClient(
        base_url=url,
        event=EventDetails.from_settings(settings),
        max_guest_count=settings.max_guest_count,
    )
    form = {
        "name": name,
        "guestCount": guests,
        "email": email,
        "phone": phone,
        "attending": attending,
        "meal": meal,
        "allergies": allergies,
        "message": message,
    }
    status = asyncio.run(client.submit(form))

    if not status.ok:
        typer.secho(status.message, fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.secho(status.message, fg=typer.colors.GREEN)


def _load_console(url: str, password: str) -> AdminConsole:
    console = AdminConsole(base_url=url, username=get_settings().admin_username)
    try:
        asyncio.run(console.load(password))
    except AdminConsoleError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)
    return console


@app.command()
def list_rsvps(
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    url: str = typer.Option(DEFAULT_URL, "--url", help="Base URL of the RSVP server"),
):
    """Show the stored RSVPs as a table."""
    console = _load_console(url, password)

    typer.secho(console.status(), fg=typer.colors.GREEN)
    if console.latest:
        typer.echo(console.render_table())


@app.command()
def export_csv(
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    url: str = typer.Option(DEFAULT_URL, "--url", help="Base URL of the RSVP server"),
    out: Path = typer.Option(Path("rsvps.csv"), "--out", "-o", help="Where to write the CSV"),
):
    """Export the stored RSVPs to a CSV file."""
    console = _load_console(url, password)
    try:
        content = console.export_csv()
    except AdminConsoleError as e:
        typer.secho(str(e), fg=typer.colors.YELLOW)
        raise typer.Exit(1)

    out.write_text(content, encoding="utf-8")
    typer.secho(f"Exported {len(console.latest)} RSVP(s) to {out}", fg=typer.colors.GREEN)


@app.command()
def invite(
    out: Path = typer.Option(Path("event.ics"), "--out", "-o", help="Where to write the invite"),
):
    """Write the calendar invite for the configured event."""
    event = EventDetails.from_settings(get_settings())
    out.write_text(build_invite(event), encoding="utf-8", newline="")
    typer.secho(f"Calendar invite written to {out}", fg=typer.colors.GREEN)
    typer.secho(f"  {event.title} at {event.location}", fg=typer.colors.BLUE)


if __name__ == "__main__":
    app()
