"""CLI commands for anniversary RSVP management."""

import asyncio
from pathlib import Path

import typer

from src.config.database import create_tables
from src.guests.reports import compute_stats, format_rsvp_date, to_csv
from src.guests.repository.read_models import SqlGuestReadModel

app = typer.Typer(help="CLI commands for anniversary RSVP management")


@app.command()
def init_db():
    """Create the guests table in the configured database."""
    asyncio.run(create_tables())
    typer.secho("Tables created!", fg=typer.colors.GREEN)


@app.command()
def list_guests():
    """Print every RSVP, most recent first."""
    records = asyncio.run(SqlGuestReadModel().list_all())

    if not records:
        typer.secho("No RSVPs yet.", fg=typer.colors.YELLOW)
        return

    for record in records:
        typer.secho(f"{record.name} <{record.email}>", fg=typer.colors.GREEN)
        typer.secho(
            f"  Adults: {record.adults}  Children: {record.children}", fg=typer.colors.BLUE
        )
        if record.phone:
            typer.secho(f"  Phone: {record.phone}", fg=typer.colors.BLUE)
        if record.message:
            typer.secho(f"  Message: {record.message}", fg=typer.colors.CYAN)
        typer.secho(f"  RSVP Date: {format_rsvp_date(record.created_at)}", fg=typer.colors.MAGENTA)


@app.command()
def stats():
    """Print head counts over every RSVP."""
    records = asyncio.run(SqlGuestReadModel().list_all())
    guest_stats = compute_stats(records)

    typer.secho(f"RSVPs: {guest_stats.total_guests}", fg=typer.colors.GREEN)
    typer.secho(f"Adults: {guest_stats.total_adults}", fg=typer.colors.BLUE)
    typer.secho(f"Children: {guest_stats.total_children}", fg=typer.colors.BLUE)
    typer.secho(f"Total attendees: {guest_stats.total_attendees}", fg=typer.colors.CYAN)


@app.command()
def export_csv(
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write the CSV to (defaults to stdout)",
    ),
):
    """Export every RSVP as CSV."""
    records = asyncio.run(SqlGuestReadModel().list_all())
    csv_text = to_csv(records)

    if output is None:
        typer.echo(csv_text, nl=False)
        return

    output.write_text(csv_text, encoding="utf-8")
    typer.secho(f"Exported {len(records)} RSVPs to {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
