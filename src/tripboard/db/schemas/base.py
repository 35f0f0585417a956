"""Declarative base shared by the trip board tables.

Base.metadata is what scripts/create_local_tables.py builds from.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
