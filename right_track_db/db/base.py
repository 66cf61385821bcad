"""Abstract Right Track database handle.

``RightTrackDB`` is the contract every Right Track database driver implements.
A driver (such as a SQLite driver shipped in its own distribution) subclasses
it and provides ``select`` and ``get``; callers such as schedule-query
libraries depend only on this interface, so drivers are interchangeable.

A driver is configured one of two ways:

- from an agency whose ``get_config()`` returns the agency's ``id`` and
  ``db.location`` (``Driver.from_agency(agency)`` or ``Driver(agency)``)
- from a plain id and location (``Driver.from_location(id, location)`` or
  ``Driver(id, location)``)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from right_track_db.config import AgencyLike
from right_track_db.errors import ConfigurationError, ConstructionError

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

DB = TypeVar("DB", bound="RightTrackDB")


def first_row(rows: Sequence[Row]) -> Row | None:
    """Return the first row in result order, or None when there are no rows."""
    return rows[0] if rows else None


def _config_value(config: Any, key: str) -> Any:
    if isinstance(config, Mapping):
        return config.get(key)
    return getattr(config, key, None)


class RightTrackDB(ABC):
    """Abstract database handle used to query a Right Track database."""

    def __new__(cls, *args, **kwargs):
        if cls is RightTrackDB:
            raise ConstructionError(
                "Cannot instantiate the abstract RightTrackDB; use a specific RightTrackDB implementation"
            )
        return super().__new__(cls)

    def __init__(self, id_or_agency: str | AgencyLike | None, location: str | None = None):
        if id_or_agency is None:
            raise ConfigurationError("No RightTrackAgency was provided")
        if isinstance(id_or_agency, str):
            self._agency = None
            self._id, self._location = id_or_agency, location
        else:
            if location is not None:
                raise ConstructionError(
                    "location is read from the agency configuration and cannot be passed with an agency"
                )
            self._agency = id_or_agency
            self._id, self._location = self._read_agency_config(id_or_agency)

        if not self._id:
            raise ConfigurationError("The Right Track DB requires an agency id")
        if not self._location:
            raise ConfigurationError(f"No database location configured for agency {self._id!r}")

        logger.debug("Initialized %r", self)

    @classmethod
    def from_agency(cls: type[DB], agency: AgencyLike | None) -> DB:
        """Create a handle from an agency's configuration properties."""
        return cls(agency)

    @classmethod
    def from_location(cls: type[DB], id: str, location: str) -> DB:
        """Create a handle from an agency id and a database location."""
        return cls(id, location)

    @staticmethod
    def _read_agency_config(agency: AgencyLike) -> tuple[str | None, str | None]:
        config = agency.get_config()
        if config is None:
            raise ConfigurationError("The RightTrackAgency has no configuration properties")
        db_config = _config_value(config, "db")
        location = _config_value(db_config, "location") if db_config is not None else None
        return _config_value(config, "id"), location

    @property
    def agency(self) -> AgencyLike | None:
        """The agency this DB is used to query, when built from one."""
        return self._agency

    @property
    def id(self) -> str:
        """The Right Track agency id code."""
        return self._id

    @property
    def location(self) -> str:
        """The location of the Right Track database."""
        return self._location

    @abstractmethod
    async def select(self, statement: str) -> list[Row]:
        """Select multiple rows from the database.

        Returns every selected row, in result order. An empty list means the
        statement matched nothing. Implementations raise ``QueryError`` when
        the statement cannot be executed.
        """

    @abstractmethod
    async def get(self, statement: str) -> Row | None:
        """Select a single row from the database.

        Returns None when no rows are selected and the first row when more
        than one is selected (see ``first_row``). Implementations raise
        ``QueryError`` when the statement cannot be executed.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, location={self._location!r})"
