#!/usr/bin/env python3
"""
Schema and session maintenance for the WordCapture store.

Creates the auth tables (users, auth_providers, credentials, sessions) on
the configured database and reports their state.

Usage:
    python run_migrations.py                    # Create missing tables
    python run_migrations.py --status           # Show table status
    python run_migrations.py --purge-sessions   # Delete expired sessions
    python run_migrations.py --drop             # Drop all tables

Configuration:
    Set DATABASE_URL, or DB_HOST / DB_USER / DB_PASSWORD / DB_NAME for MySQL,
    in your .env file. Without either, a local SQLite file is used.
"""

import argparse
import sys
from datetime import datetime, timezone

from rich.console import Console
from rich.table import Table
from sqlalchemy import Engine, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from modules.auth.repository import CredentialRepository, SessionRepository
from shared.config import get_settings
from shared.database import (
    Base,
    create_schema,
    create_session_factory,
    drop_schema,
    engine_from_settings,
)

console = Console()


def get_engine() -> Engine:
    """Create an engine for the configured database and check it connects."""
    settings = get_settings()
    engine = engine_from_settings(settings)

    try:
        with engine.connect():
            pass
    except SQLAlchemyError as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)

    return engine


def show_status(engine: Engine):
    """Show which tables exist and how many rows they hold."""
    existing = set(inspect(engine).get_table_names())
    counts = {}
    if existing.issuperset(Base.metadata.tables):
        counts = CredentialRepository(create_session_factory(engine)).count_rows()

    table = Table(title="Schema Status")
    table.add_column("Table", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Rows", justify="right")

    for name in Base.metadata.tables:
        if name in existing:
            table.add_row(name, "[green]Present[/green]", str(counts.get(name, "")))
        else:
            table.add_row(name, "[yellow]Missing[/yellow]", "")

    console.print(table)


def create_tables(engine: Engine):
    """Create every missing table."""
    existing = set(inspect(engine).get_table_names())
    missing = [name for name in Base.metadata.tables if name not in existing]

    if not missing:
        console.print("[green]Schema is up to date![/green]")
        return

    console.print(f"Creating {len(missing)} table(s):")
    for name in missing:
        console.print(f"  - {name}")

    try:
        create_schema(engine)
    except SQLAlchemyError as e:
        console.print(f"[red]✗[/red] Schema creation failed: {e}")
        raise

    console.print()
    console.print("[green]Schema created successfully![/green]")


def drop_tables(engine: Engine):
    """Drop every table after confirmation."""
    console.print("[yellow]Warning:[/yellow] This deletes every user, credential and session.")

    response = input("Continue? [y/N] ")
    if response.lower() != "y":
        console.print("Aborted.")
        return

    drop_schema(engine)
    console.print("[green]✓[/green] All tables dropped")


def purge_sessions(engine: Engine):
    """Delete sessions whose expiry has passed."""
    sessions = SessionRepository(create_session_factory(engine))
    removed = sessions.delete_expired(datetime.now(timezone.utc))
    console.print(f"[green]✓[/green] Removed {removed} expired session(s)")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Manage the WordCapture database schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_migrations.py                   Create missing tables
  python run_migrations.py --status          Show table status
  python run_migrations.py --purge-sessions  Delete expired sessions
  python run_migrations.py --drop            Drop all tables
        """
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--status",
        action="store_true",
        help="Show table status without changing anything"
    )
    group.add_argument(
        "--drop",
        action="store_true",
        help="Drop all tables (asks for confirmation)"
    )
    group.add_argument(
        "--purge-sessions",
        action="store_true",
        help="Delete expired sessions"
    )

    args = parser.parse_args()

    console.print("[bold]WordCapture Database Schema[/bold]")
    console.print(f"[dim]{make_url(get_settings().sqlalchemy_url).render_as_string(hide_password=True)}[/dim]")
    console.print()

    engine = get_engine()

    try:
        if args.status:
            show_status(engine)
        elif args.drop:
            drop_tables(engine)
        elif args.purge_sessions:
            purge_sessions(engine)
        else:
            create_tables(engine)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
