from flask.cli import with_appcontext
from staffing.database.seed.seed_clients import seed as seed_clients
from staffing.database.seed.seed_candidates import seed as seed_candidates
from staffing.database.seed.seed_job_orders import seed as seed_job_orders
from staffing.database.seed.seed_assignments import seed as seed_assignments
from staffing.extensions import db

import click


@click.command("init-db")
@with_appcontext
def init_db():
    """Create all tables that do not exist yet."""
    db.create_all()
    click.echo("✅ Tables created!")


@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_clients()
    seed_candidates()
    seed_job_orders()
    seed_assignments()
    click.echo("✅ All seeders completed!")
