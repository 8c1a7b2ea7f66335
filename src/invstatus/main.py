"""
Command line front-end over an exported API snapshot.

Commands:
- products                -> stock status per product and summary counts
- materials               -> stock health band per raw material (--attention filters)
- stage <batch>           -> four-step progress for a batch at a given stage
- notifications           -> notification sections, fixed category order
- activity                -> activity-log sections, busiest first
- access                  -> permission grid for the snapshot's user
- export [xlsx]           -> Excel status report (exports folder by default)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from invstatus.application.container import AppContainer, build_container
from invstatus.config import get_app_paths
from invstatus.domain.activity_messages import format_activity_message
from invstatus.domain.errors import AppError
from invstatus.domain.models import NotificationSection
from invstatus.domain.stock import format_stock_rolls
from invstatus.logging_config import setup_logging

log = logging.getLogger(__name__)

app = typer.Typer(help="Inventory status: stock, production and notification views over an API snapshot.")
console = Console()

SEVERITY_STYLES = {
    "critical": "bold red",
    "warning": "yellow",
    "ok": "green",
    "info": "blue",
    "neutral": "dim",
}


def _snapshot_option():
    return typer.Option(..., "--snapshot", "-s", help="JSON snapshot exported from the API.")


def _json_option():
    return typer.Option(False, "--json", help="Print JSON instead of a table.")


def _container(snapshot: Path) -> AppContainer:
    try:
        return build_container(snapshot)
    except AppError as exc:
        _fail(exc)


def _fail(exc: AppError) -> None:
    log.warning("cli_error type=%s error=%s", type(exc).__name__, exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def _print_json(obj) -> None:
    typer.echo(json.dumps(obj, ensure_ascii=False, indent=2))


def _sections_payload(sections: list[NotificationSection]) -> list[dict]:
    return [
        {
            "category": s.category,
            "title": s.title,
            "unread_count": s.unread_count,
            "notification_ids": [n.id for n in s.notifications],
        }
        for s in sections
    ]


def _print_sections(sections: list[NotificationSection], title: str) -> None:
    if not sections:
        console.print(f"[yellow]No {title.lower()}.[/yellow]")
        return
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Section", style="bold")
    table.add_column("Total", justify="right")
    table.add_column("Unread", justify="right")
    for s in sections:
        table.add_row(s.title, str(len(s.notifications)), str(s.unread_count))
    console.print(table)


@app.command("products")
def cmd_products(snapshot: Path = _snapshot_option(), as_json: bool = _json_option()):
    """Stock status for every product."""
    c = _container(snapshot)
    try:
        rows = c.inventory.product_statuses()
        summary = c.inventory.product_summary()
    except AppError as exc:
        _fail(exc)

    if as_json:
        _print_json({
            "summary": summary,
            "products": [
                {"id": p.id, "name": p.name, "current_stock": p.current_stock, "status": s.value}
                for p, s in rows
            ],
        })
        return

    table = Table(title="Products", box=box.ROUNDED)
    for col in ("ID", "Name", "Stock", "Min", "Status"):
        table.add_column(col)
    for p, s in rows:
        table.add_row(p.id, p.name, format_stock_rolls(p.current_stock), f"{p.min_stock_level:g}", s.value)
    console.print(table)
    console.print(
        f"Total: {summary['total']}  Low stock: {summary['low_stock']}  Out of stock: {summary['out_of_stock']}"
    )


@app.command("materials")
def cmd_materials(
    snapshot: Path = _snapshot_option(),
    attention: bool = typer.Option(False, "--attention", help="Only out-of-stock and low-stock materials."),
    as_json: bool = _json_option(),
):
    """Stock health band for every raw material."""
    c = _container(snapshot)
    try:
        if attention:
            rows = c.inventory.materials_needing_attention()
        else:
            rows = c.inventory.material_health()
        summary = c.inventory.material_summary()
    except AppError as exc:
        _fail(exc)

    if as_json:
        _print_json({
            "summary": summary,
            "materials": [
                {
                    "id": m.id,
                    "name": m.name,
                    "current_stock": m.current_stock,
                    "severity": h.severity.value,
                    "message": h.message,
                }
                for m, h in rows
            ],
        })
        return

    table = Table(title="Raw materials", box=box.ROUNDED)
    for col in ("ID", "Name", "Stock", "Reorder", "Max", "Health"):
        table.add_column(col)
    for m, h in rows:
        style = SEVERITY_STYLES.get(h.severity.value, "")
        table.add_row(
            m.id, m.name, f"{m.current_stock:g} {m.unit}".strip(),
            f"{m.reorder_point:g}", f"{m.max_capacity:g}",
            f"[{style}]{h.message}[/{style}]" if style else h.message,
        )
    console.print(table)


@app.command("stage")
def cmd_stage(
    batch_id: str = typer.Argument(..., help="Batch id or batch number."),
    stage: str = typer.Option("planning", "--stage", help="planning, machine, wastage or individual."),
    snapshot: Path = _snapshot_option(),
    as_json: bool = _json_option(),
):
    """Progress of a production batch at the given stage."""
    c = _container(snapshot)
    try:
        batch, progress = c.production.stage_progress(batch_id, stage)
    except AppError as exc:
        _fail(exc)

    if as_json:
        _print_json({
            "batch": batch.batch_number or batch.id,
            "status": batch.status,
            "overall_percent": progress.overall_percent,
            "current": progress.current_name,
            "stages": [{"id": s.id.value, "name": s.name, "status": s.status.value} for s in progress.stages],
        })
        return

    table = Table(title=f"Batch {batch.batch_number or batch.id} ({batch.status})", box=box.ROUNDED)
    table.add_column("Stage")
    table.add_column("Status")
    for s in progress.stages:
        table.add_row(s.name, s.status.value.capitalize())
    console.print(table)
    console.print(f"Overall Progress: {progress.overall_percent}% Complete")
    console.print(f"Current: {progress.current_name}")


@app.command("notifications")
def cmd_notifications(
    snapshot: Path = _snapshot_option(),
    hide_dismissed: bool = typer.Option(False, "--hide-dismissed"),
    as_json: bool = _json_option(),
):
    """Notifications grouped into fixed sections."""
    c = _container(snapshot)
    try:
        sections = c.notifications.notification_sections(include_dismissed=not hide_dismissed)
    except AppError as exc:
        _fail(exc)

    if as_json:
        _print_json(_sections_payload(sections))
        return
    _print_sections(sections, "Notifications")


@app.command("activity")
def cmd_activity(snapshot: Path = _snapshot_option(), as_json: bool = _json_option()):
    """Activity logs grouped by domain, busiest first."""
    c = _container(snapshot)
    try:
        sections = c.notifications.activity_sections()
    except AppError as exc:
        _fail(exc)

    if as_json:
        payload = _sections_payload(sections)
        for entry, section in zip(payload, sections):
            entry["messages"] = [format_activity_message(n) for n in section.notifications]
        _print_json(payload)
        return
    _print_sections(sections, "Activity logs")
    for section in sections:
        console.print(f"[bold]{section.title}[/bold]")
        for n in section.notifications:
            marker = "*" if n.is_unread else " "
            console.print(f" {marker} {format_activity_message(n)}", markup=False)


@app.command("access")
def cmd_access(snapshot: Path = _snapshot_option(), as_json: bool = _json_option()):
    """Permission grid for the snapshot's signed-in user."""
    c = _container(snapshot)
    matrix = c.access.matrix()

    if as_json:
        _print_json({"role": c.access.role, "admin": c.access.is_admin(), "permissions": matrix})
        return

    table = Table(title=f"Access for role '{c.access.role or 'anonymous'}'", box=box.ROUNDED)
    table.add_column("Module", style="bold")
    actions = list(next(iter(matrix.values())).keys())
    for a in actions:
        table.add_column(a.capitalize(), justify="center")
    for module, flags in matrix.items():
        table.add_row(module, *("yes" if flags[a] else "-" for a in actions))
    console.print(table)


@app.command("export")
def cmd_export(
    output: Optional[Path] = typer.Argument(None, help="Target .xlsx file. Defaults to the exports folder."),
    snapshot: Path = _snapshot_option(),
):
    """Write the Excel status report."""
    c = _container(snapshot)
    if output is None:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        output = get_app_paths().exports_dir / f"status_report_{ts}.xlsx"
    try:
        c.reporting.export_status_report_excel(str(output))
    except AppError as exc:
        _fail(exc)
    typer.echo(f"Report written to {output}")


def main() -> None:
    paths = get_app_paths()
    setup_logging(paths.logs_dir, level=logging.INFO)
    app()


if __name__ == "__main__":
    main()
