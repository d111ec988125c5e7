"""Database management CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.cruddemo.core.services import DbManageService, DbSessionService, EmployeeService

console = Console()

db_app = typer.Typer(help="Create, seed and inspect the employee database")


def _db_service() -> DbSessionService:
    return DbSessionService()


@db_app.command("init")
def init_db() -> None:
    """Create all database tables."""
    DbManageService(_db_service()).create_all()
    console.print("[green]✅ Database tables created[/green]")


@db_app.command("seed")
def seed_db() -> None:
    """Insert the sample employees if the employee table is empty."""
    db_service = _db_service()
    manager = DbManageService(db_service)
    manager.create_all()
    inserted = manager.seed()
    if inserted:
        console.print(f"[green]✅ Inserted {inserted} sample employees[/green]")
    else:
        console.print("[yellow]Employee table already has rows; nothing inserted[/yellow]")


@db_app.command("list")
def list_employees() -> None:
    """Print every stored employee."""
    db_service = _db_service()
    DbManageService(db_service).create_all()
    with db_service.session_scope() as session:
        employees = EmployeeService(session).find_all()

    if not employees:
        console.print("[yellow]No employees found[/yellow]")
        return

    table = Table(title="Employees")
    table.add_column("ID", style="cyan")
    table.add_column("First Name", style="magenta")
    table.add_column("Last Name", style="magenta")
    table.add_column("Email", style="blue")
    for employee in employees:
        table.add_row(
            str(employee.id),
            employee.first_name,
            employee.last_name,
            employee.email or "",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(employees)} employees[/green]")
