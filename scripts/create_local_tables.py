#!/usr/bin/env python3
"""Create the trip board tables for local development.

This script creates the four tables (trip, attendees, activities, selections)
on the PostgreSQL database named by DATABASE_URL, using the SQLAlchemy models
in tripboard.db.schemas. Existing tables are left as they are. Pass --seed to
add a couple of attendees so the UI has someone to pick.

Usage:
    python scripts/create_local_tables.py [--seed]
"""

import sys
from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tripboard.config import get_config
from tripboard.db import Base

SEED_ATTENDEES = ("Alex", "Sam")


def build_engine():
    """Create an engine for DATABASE_URL using the psycopg 3 driver."""
    config = get_config()
    url = make_url(config.database_url).set(drivername="postgresql+psycopg")
    if config.database_password:
        url = url.set(password=config.database_password)
    return create_engine(url)


def seed_attendees(engine) -> None:
    with engine.begin() as conn:
        existing = conn.execute(text("SELECT COUNT(*) FROM attendees")).scalar_one()
        if existing:
            print(f"✓ attendees already has {existing} rows")
            return
        for name in SEED_ATTENDEES:
            conn.execute(text("INSERT INTO attendees (name) VALUES (:name)"), {"name": name})
        print(f"✓ Seeded {len(SEED_ATTENDEES)} attendees")


def main():
    """Create all trip board tables."""
    config = get_config()
    if not config.database_url:
        print("DATABASE_URL is not set")
        sys.exit(1)

    engine = build_engine()
    print(f"Creating tables at {engine.url.render_as_string(hide_password=True)}...")
    print()

    with engine.begin() as conn:
        conn.execute(text('CREATE EXTENSION IF NOT EXISTS "pgcrypto"'))
    Base.metadata.create_all(engine)
    for table in Base.metadata.sorted_tables:
        print(f"✓ {table.name} table ready")

    if "--seed" in sys.argv[1:]:
        seed_attendees(engine)

    print()
    print("✅ All trip board tables ready")


if __name__ == "__main__":
    main()
