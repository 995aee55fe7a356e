#!/usr/bin/env python3
"""
Apply the SQL files in migrations/ to the Supabase Postgres database.

Each file runs once, in name order, inside its own transaction. Applied
files are recorded in the ``_migrations`` table with a checksum so edits to
an already-applied file are reported.

Usage:
    uv run python run_migrations.py                    # Apply pending migrations
    uv run python run_migrations.py --status           # Show migration status
    uv run python run_migrations.py --dry-run          # Show what would run
    uv run python run_migrations.py --force 001        # Re-apply a migration

Configuration:
    SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
"""

import argparse
import hashlib
import sys
from dataclasses import dataclass
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


@dataclass
class Migration:
    name: str
    path: Path
    checksum: str

    @classmethod
    def from_path(cls, path: Path) -> "Migration":
        content = path.read_text()
        return cls(
            name=path.name,
            path=path,
            checksum=hashlib.sha256(content.encode()).hexdigest()[:16],
        )


def discover(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """All migration files, sorted by name."""
    if not directory.exists():
        console.print(f"[yellow]Warning:[/yellow] Migrations directory not found: {directory}")
        return []
    return [Migration.from_path(p) for p in sorted(directory.glob("*.sql"))]


def connect():
    settings = get_settings()
    if not settings.supabase_db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)
    try:
        return psycopg2.connect(settings.supabase_db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_tracking_table(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                "CREATE TABLE IF NOT EXISTS {} ("
                " name VARCHAR(255) PRIMARY KEY,"
                " checksum VARCHAR(64) NOT NULL,"
                " applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW())"
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def applied_checksums(conn) -> dict[str, tuple[str, object]]:
    """Map of migration name to (checksum, applied_at)."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {name: (checksum, applied_at) for name, checksum, applied_at in cur.fetchall()}


def pending(migrations: list[Migration], applied: dict[str, tuple[str, object]]) -> list[Migration]:
    result = []
    for migration in migrations:
        if migration.name not in applied:
            result.append(migration)
        elif applied[migration.name][0] != migration.checksum:
            console.print(
                f"[yellow]Warning:[/yellow] {migration.name} changed after it was applied"
            )
    return result


def apply(conn, migration: Migration, dry_run: bool = False) -> None:
    if dry_run:
        console.print(f"[cyan]Would run:[/cyan] {migration.name}")
        return

    console.print(f"[blue]Running:[/blue] {migration.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.path.read_text())
            cur.execute(
                sql.SQL(
                    "INSERT INTO {} (name, checksum) VALUES (%s, %s) "
                    "ON CONFLICT (name) DO UPDATE SET checksum = EXCLUDED.checksum, applied_at = NOW()"
                ).format(sql.Identifier(MIGRATIONS_TABLE)),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {migration.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {migration.name} applied")


def show_status(conn, migrations: list[Migration]) -> None:
    applied = applied_checksums(conn)
    if not migrations and not applied:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")
    table.add_column("Checksum")

    for migration in migrations:
        if migration.name in applied:
            checksum, applied_at = applied[migration.name]
            state = "[green]Applied[/green]"
            if checksum != migration.checksum:
                state = "[yellow]Changed[/yellow]"
            table.add_row(migration.name, state, f"{applied_at:%Y-%m-%d %H:%M:%S}", checksum)
        else:
            table.add_row(migration.name, "[yellow]Pending[/yellow]", "", migration.checksum)

    console.print(table)


def force(conn, migrations: list[Migration], prefix: str) -> None:
    matches = [m for m in migrations if m.name.startswith(prefix)]
    if len(matches) != 1:
        names = ", ".join(m.name for m in matches) or "none"
        console.print(f"[red]Error:[/red] '{prefix}' must match exactly one migration (matched: {names})")
        sys.exit(1)

    migration = matches[0]
    console.print(f"[yellow]Warning:[/yellow] Re-applying {migration.name}")
    if input("Continue? [y/N] ").lower() != "y":
        console.print("Aborted.")
        return
    apply(conn, migration)


def main():
    parser = argparse.ArgumentParser(description="Apply Bookshelf database migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations without running them")
    parser.add_argument("--force", metavar="PREFIX", help="Re-apply the migration whose name starts with PREFIX")
    args = parser.parse_args()

    console.print("[bold]Bookshelf Database Migrations[/bold]\n")

    migrations = discover()
    conn = connect()
    try:
        ensure_tracking_table(conn)

        if args.status:
            show_status(conn, migrations)
            return
        if args.force:
            force(conn, migrations, args.force)
            return

        todo = pending(migrations, applied_checksums(conn))
        if not todo:
            console.print("[green]All migrations are up to date![/green]")
            return

        console.print(f"Found {len(todo)} pending migration(s)")
        for migration in todo:
            apply(conn, migration, dry_run=args.dry_run)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
