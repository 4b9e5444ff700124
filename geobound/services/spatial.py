"""
Spatial SQL helpers
===================
Turns a :class:`~geobound.spatial.bound.Bound` into GeoAlchemy2 / PostGIS
expressions so callers can filter any geometry column by a box.

All expressions use ST_MakeEnvelope, which a GIST index on the target
column can serve directly.  These helpers only build statements; running
them is the caller's business.
"""

from __future__ import annotations

import logging

from geoalchemy2.functions import ST_Contains, ST_Intersects, ST_MakeEnvelope
from sqlalchemy import Select, Table, select
from sqlalchemy.sql.elements import ColumnElement

from geobound.config import get_settings
from geobound.spatial.bound import Bound

logger = logging.getLogger(__name__)
settings = get_settings()


def envelope(bound: Bound, srid: int | None = None) -> ST_MakeEnvelope:
    """``ST_MakeEnvelope(west, south, east, north, srid)`` for the bound."""
    return ST_MakeEnvelope(
        bound.west, bound.south,
        bound.east, bound.north,
        settings.srid if srid is None else srid,
    )


def intersects_condition(
    column: ColumnElement,
    bound: Bound,
    srid: int | None = None,
) -> ST_Intersects:
    """Geometries in ``column`` touching or overlapping the bound."""
    return ST_Intersects(column, envelope(bound, srid))


def contains_condition(
    column: ColumnElement,
    bound: Bound,
    srid: int | None = None,
) -> ST_Contains:
    """Geometries in ``column`` lying fully inside the bound."""
    return ST_Contains(envelope(bound, srid), column)


def select_within(
    table: Table,
    geom_column: str,
    bound: Bound,
    srid: int | None = None,
    max_results: int | None = None,
) -> Select:
    """
    ``SELECT * FROM table`` restricted to rows intersecting the bound.

    Parameters
    ----------
    table : Table
    geom_column : str
        Name of the geometry column on ``table``.
    bound : Bound
    srid : int, optional
        Defaults to ``Settings.srid``.
    max_results : int, optional
        Safety cap on the number of rows.
    """
    if bound.empty():
        logger.warning("Building a spatial query for an empty bound %s", bound)

    stmt = select(table).where(
        intersects_condition(table.c[geom_column], bound, srid)
    )
    if max_results is not None:
        stmt = stmt.limit(max_results)
    return stmt
