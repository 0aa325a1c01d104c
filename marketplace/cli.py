"""Marketplace CLI tool (marketctl)."""

from typing import Optional

import typer

app = typer.Typer(name="marketctl", help="Freelance marketplace CLI")
db_app = typer.Typer(help="Database management commands")
remarks_app = typer.Typer(help="Deletion remark commands")
app.add_typer(db_app, name="db")
app.add_typer(remarks_app, name="remarks")


def remark_table():
    from marketplace.ui.data_table import Column, DataTable

    return DataTable(
        [
            Column("id", "ID"),
            Column("entity_type", "Type"),
            Column("entity_id", "Entity"),
            Column("project_id", "Project"),
            Column("deleted_by", "By", render=lambda r: f"{r.deleted_by} ({r.deleted_by_role or '-'})"),
            Column("created_at", "When", render=lambda r: r.created_at.strftime("%Y-%m-%d %H:%M") if r.created_at else "-"),
            Column("reason", "Reason", render=lambda r: r.reason if len(r.reason) <= 60 else r.reason[:57] + "..."),
        ],
        empty_message="No deletion remarks found",
    )


@db_app.command("init")
def db_init():
    """Create all tables."""
    from marketplace.db.base import Base
    from marketplace.db.session import engine
    import marketplace.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    typer.echo("Tables created")


@db_app.command("seed")
def db_seed():
    """Insert a demo project with milestones and bids."""
    from marketplace.db.session import SessionLocal
    from marketplace.db.seeds.seed_sample_data import seed_sample_data

    db = SessionLocal()
    try:
        seed_sample_data(db)
    finally:
        db.close()


@remarks_app.command("list")
def list_remarks(
    entity_type: Optional[str] = typer.Option(None, help="Filter by entity type"),
    project_id: Optional[str] = typer.Option(None, help="Filter by project id"),
    page: int = typer.Option(1, min=1),
    page_size: int = typer.Option(50, min=1, max=200),
):
    """Print deletion remarks, newest first."""
    from marketplace.db.session import SessionLocal
    from marketplace.services.deletion_remark_service import deletion_remark_service

    db = SessionLocal()
    try:
        result = deletion_remark_service.query(
            db, entity_type=entity_type, project_id=project_id, page=page, page_size=page_size,
        )
        typer.echo(remark_table().render_text(result["remarks"]))
        typer.echo(f"\n{len(result['remarks'])} of {result['total']} (page {result['page']})")
    finally:
        db.close()


@remarks_app.command("add")
def add_remark(
    entity_type: str = typer.Argument(..., help="bid, project, user, milestone, consultation or other"),
    entity_id: str = typer.Argument(..., help="Id of the deleted entity"),
    reason: str = typer.Option(..., "--reason", "-r", help="Why it was deleted"),
    deleted_by: str = typer.Option(..., "--by", help="Id of the acting user"),
    role: Optional[str] = typer.Option(None, help="Role of the acting user"),
    project_id: Optional[str] = typer.Option(None, help="Owning project id"),
):
    """Record a deletion remark directly."""
    from marketplace.core.config import settings
    from marketplace.core.exceptions import ValidationError
    from marketplace.db.session import SessionLocal
    from marketplace.services.deletion_remark_service import deletion_remark_service
    from marketplace.utils.notification_sound import play_notification_sound

    db = SessionLocal()
    try:
        remark = deletion_remark_service.create(
            db,
            entity_type=entity_type,
            entity_id=entity_id,
            reason=reason,
            deleted_by=deleted_by,
            deleted_by_role=role,
            project_id=project_id,
        )
    except ValidationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)
    finally:
        db.close()

    typer.echo(f"Recorded deletion remark {remark.id}")
    if settings.NOTIFICATION_SOUND_ENABLED:
        chime = play_notification_sound()
        if chime is not None:
            chime.join()


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Host"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Auto-reload"),
):
    """Start the API server."""
    import uvicorn
    uvicorn.run("marketplace.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
