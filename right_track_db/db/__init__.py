"""Database layer — abstract Right Track database handle."""

from right_track_db.db.base import RightTrackDB, Row, first_row
from right_track_db.db.callbacks import get_with_callback, select_with_callback

__all__ = ["RightTrackDB", "Row", "first_row", "get_with_callback", "select_with_callback"]
