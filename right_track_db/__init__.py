"""Right Track DB — abstract interface for querying a Right Track database."""

from right_track_db.config import AgencyConfig, AgencyDatabaseConfig, RightTrackAgency
from right_track_db.db import RightTrackDB, Row, first_row, get_with_callback, select_with_callback
from right_track_db.errors import (
    ConfigurationError,
    ConstructionError,
    QueryError,
    RightTrackDBError,
)
from right_track_db.logging_config import setup_logging

__all__ = [
    "AgencyConfig",
    "AgencyDatabaseConfig",
    "ConfigurationError",
    "ConstructionError",
    "QueryError",
    "RightTrackAgency",
    "RightTrackDB",
    "RightTrackDBError",
    "Row",
    "first_row",
    "get_with_callback",
    "select_with_callback",
    "setup_logging",
]
