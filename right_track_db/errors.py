"""Exceptions raised by Right Track database handles."""

from __future__ import annotations


class RightTrackDBError(Exception):
    """Base class for Right Track database errors."""


class ConstructionError(RightTrackDBError, TypeError):
    """A database handle was constructed in a way that is not allowed."""


class ConfigurationError(RightTrackDBError, ValueError):
    """The agency configuration is missing or incomplete."""


class QueryError(RightTrackDBError):
    """A SELECT statement could not be executed."""

    def __init__(self, message: str, statement: str = ""):
        super().__init__(message)
        self.statement = statement
