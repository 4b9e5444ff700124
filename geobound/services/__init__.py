"""Services subpackage — spatial SQL expressions built from bounds."""

from geobound.services.spatial import (
    contains_condition,
    envelope,
    intersects_condition,
    select_within,
)

__all__ = [
    "contains_condition",
    "envelope",
    "intersects_condition",
    "select_within",
]
